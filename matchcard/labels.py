"""
Static captions printed on the match card, per language.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel


class CardLabels(BaseModel):
    title: str
    division: str
    date: str
    match: str
    field: str
    away_team: str
    home_team: str
    score: str
    present: str
    number: str
    name: str
    cautions: str
    goals: str
    reserve: str
    reserve_marker: str
    referee: str
    assistant_referee: str
    legend: List[str]
    referee_observations: str
    coach_observations: str


FRENCH = CardLabels(
    title="Carte de match",
    division="Division",
    date="Date",
    match="Match",
    field="Terrain",
    away_team="Visiteur",
    home_team="Receveur",
    score="Pointage",
    present="Présent",
    number="No",
    name="Nom",
    cautions="A/E",
    goals="Buts",
    reserve="R",
    reserve_marker="Oui",
    referee="Arbitre",
    assistant_referee="Arbitre Assistant",
    legend=["A - Avertissement", "E - Expulsion", "R - Réserviste"],
    referee_observations="Observations de l'arbitres",
    coach_observations="Observations de l'entraîneur",
)

ENGLISH = CardLabels(
    title="Match card",
    division="Division",
    date="Date",
    match="Match",
    field="Field",
    away_team="Away",
    home_team="Home",
    score="Score",
    present="Present",
    number="No",
    name="Name",
    cautions="C/S",
    goals="Goals",
    reserve="R",
    reserve_marker="Yes",
    referee="Referee",
    assistant_referee="Assistant Referee",
    legend=["C - Caution", "S - Sending off", "R - Reserve"],
    referee_observations="Referee's observations",
    coach_observations="Coach's observations",
)

LABELS: Dict[str, CardLabels] = {
    'fr': FRENCH,
    'en': ENGLISH,
}

DEFAULT_LOCALE = 'fr'


def get_labels(locale: Optional[str] = None) -> CardLabels:
    """Label set for a locale; unknown locales fall back to French"""
    if not locale:
        return LABELS[DEFAULT_LOCALE]
    return LABELS.get(locale.strip().lower(), LABELS[DEFAULT_LOCALE])
