"""
Transport-independent request handling.

``handle_match_card`` takes the decoded JSON body and returns a ``CardResponse``;
the Flask blueprint in ``routes`` only translates between HTTP and these values.
"""

import logging
from typing import Any, NamedTuple, Optional, Union

from .card import generate_match_card_pdf
from .errors import InvalidRequestError, MatchCardError, RenderingError
from .models import parse_match_card_request
from .utils import generate_pdf_filename

logger = logging.getLogger(__name__)

PDF_MIMETYPE = 'application/pdf'
JSON_MIMETYPE = 'application/json'


class CardResponse(NamedTuple):
    status: int
    content_type: str
    body: Union[bytes, dict]
    filename: Optional[str] = None


def error_response(status: int, message: str) -> CardResponse:
    return CardResponse(status, JSON_MIMETYPE, {'success': False, 'errors': [message]})


def handle_match_card(payload: Any, renderer, locale: Optional[str] = None) -> CardResponse:
    """Validate ``payload`` and render it to a PDF response.

    Invalid bodies give a 400 and never reach the renderer. Every other failure
    gives a 500 with a generic message; details only go to the log.
    """
    try:
        request = parse_match_card_request(payload)
    except InvalidRequestError as e:
        return error_response(400, e.message)

    logger.info("Match card requested for %r (%d players)", request.currentTeamName, len(request.teamPlayers))

    try:
        pdf_bytes = generate_match_card_pdf(request, renderer, locale=locale)
    except RenderingError as e:
        return error_response(500, e.message)
    except Exception:
        logger.exception("Unexpected error generating match card for %r", request.currentTeamName)
        return error_response(500, MatchCardError.message)

    return CardResponse(200, PDF_MIMETYPE, pdf_bytes, generate_pdf_filename(request.currentTeamName))
