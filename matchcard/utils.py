from typing import Any

from werkzeug.utils import secure_filename


def format_player_name(player: Any) -> str:
    """Roster display name: "last_name, first_name" """
    return f"{player.last_name}, {player.first_name}"


def generate_pdf_filename(team_name: str) -> str:
    """Download name for a team's match card, safe for Content-Disposition"""
    team_part = secure_filename(team_name or '').replace('_', '-').lower()
    if not team_part:
        return "match-card.pdf"
    return f"match-card-{team_part}.pdf"
