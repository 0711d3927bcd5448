"""
Request models for the match card endpoint.

Field names follow the JSON body sent by the client, so the payload can be
validated as-is.
"""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, StrictBool, StrictStr, ValidationError, validator

from .errors import InvalidRequestError

logger = logging.getLogger(__name__)


class PlayerEntry(BaseModel):
    """One line of the team roster"""
    first_name: StrictStr
    last_name: StrictStr
    reserve: StrictBool


class MatchCardRequest(BaseModel):
    """Validated body of a match card request"""
    divisionName: StrictStr
    formattedDate: Optional[StrictStr] = None
    matchNumber: Optional[StrictStr] = None
    fieldName: Optional[StrictStr] = None
    currentTeamName: StrictStr  # Team whose roster is printed
    homeTeamName: Optional[StrictStr] = None
    awayTeamName: Optional[StrictStr] = None
    teamPlayers: List[PlayerEntry]

    @validator('formattedDate', 'matchNumber', 'fieldName', 'homeTeamName', 'awayTeamName', pre=True)
    def reject_null(cls, v):
        # Optional means "may be left out", not "may be null"
        if v is None:
            raise ValueError('Value must be a string when provided')
        return v


def parse_match_card_request(payload: Any) -> MatchCardRequest:
    """Validate an untyped JSON payload.

    Raises:
        InvalidRequestError: when the payload is not a valid match card request.
            The pydantic errors are kept in ``details`` for logging only.
    """
    if not isinstance(payload, dict):
        logger.info("Rejected match card payload of type %s", type(payload).__name__)
        raise InvalidRequestError(details=[{'loc': (), 'msg': 'Body must be a JSON object'}])

    try:
        return MatchCardRequest.model_validate(payload)
    except ValidationError as e:
        errors = e.errors()
        logger.info("Rejected match card payload: %d validation error(s)", len(errors))
        logger.debug("Validation errors: %s", errors)
        raise InvalidRequestError(details=errors) from e
