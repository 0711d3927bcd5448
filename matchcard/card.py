"""
Match card rendering.

A validated request is mapped to a typed view model, the view model is rendered
through an autoescaping Jinja2 template, and the resulting markup is printed to
PDF by a renderer (see ``matchcard.pdf``).
"""

import logging
from typing import List, Optional, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import BaseModel

from .config import CARD_LOCALE, ROSTER_SIZE
from .labels import CardLabels, get_labels
from .models import MatchCardRequest, PlayerEntry
from .utils import format_player_name

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "match_card.html"

_env = Environment(
    loader=PackageLoader("matchcard", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


class RosterRow(BaseModel):
    """One printed roster line; an empty row is left blank on the card"""
    number: str = ""  # Filled in by hand at the field
    name: str = ""
    reserve: bool = False


class MatchCardView(BaseModel):
    """Everything the template needs, already resolved to display strings"""
    current_team_name: str
    division_name: str
    formatted_date: str = ""
    match_number: str = ""
    field_name: str = ""
    home_team_name: str = ""
    away_team_name: str = ""
    rows: List[RosterRow]
    labels: CardLabels


def build_roster_rows(players: Sequence[PlayerEntry], size: int = ROSTER_SIZE) -> List[RosterRow]:
    """Lay the roster out on exactly ``size`` rows, in roster order.

    Rows past the end of the roster are blank. Players past ``size`` do not fit
    on the form and are dropped.
    """
    if len(players) > size:
        logger.warning(
            "Roster has %d players, only the first %d fit on the card; dropping %d",
            len(players), size, len(players) - size,
        )

    rows = []
    for i in range(size):
        if i < len(players):
            player = players[i]
            rows.append(RosterRow(name=format_player_name(player), reserve=player.reserve))
        else:
            rows.append(RosterRow())
    return rows


def build_card_view(request: MatchCardRequest, locale: Optional[str] = None) -> MatchCardView:
    return MatchCardView(
        current_team_name=request.currentTeamName,
        division_name=request.divisionName,
        formatted_date=request.formattedDate or "",
        match_number=request.matchNumber or "",
        field_name=request.fieldName or "",
        home_team_name=request.homeTeamName or "",
        away_team_name=request.awayTeamName or "",
        rows=build_roster_rows(request.teamPlayers),
        labels=get_labels(locale or CARD_LOCALE),
    )


def render_card_html(view: MatchCardView) -> str:
    """Render the card markup. Same view in, same string out."""
    template = _env.get_template(TEMPLATE_NAME)
    return template.render(card=view, labels=view.labels)


def generate_match_card_pdf(request: MatchCardRequest, renderer, locale: Optional[str] = None) -> bytes:
    """Render a validated request to PDF bytes.

    ``renderer`` is anything with a ``render(markup) -> bytes`` method, normally
    a ``PDFRenderer``. Its ``RenderingError`` propagates unchanged.
    """
    view = build_card_view(request, locale=locale)
    html = render_card_html(view)
    logger.debug("Rendered match card markup for %s (%d chars)", view.current_team_name, len(html))
    return renderer.render(html)
