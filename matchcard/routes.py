import io

from flask import Blueprint, current_app, jsonify, request, send_file

from .handlers import PDF_MIMETYPE, handle_match_card

# Create blueprint
bp = Blueprint('main', __name__)


@bp.route('/api/pdf', methods=['POST'])
def generate_match_card():
    """Generate a match card PDF from the posted roster"""
    # Unparsable or non-JSON bodies come through as None and fail validation
    payload = request.get_json(silent=True)
    renderer = current_app.extensions['pdf_renderer']

    result = handle_match_card(payload, renderer, locale=current_app.config['CARD_LOCALE'])

    if result.content_type != PDF_MIMETYPE:
        if result.status == 400:
            current_app.logger.warning(f"Invalid match card request on {request.path}")
        return jsonify(result.body), result.status

    return send_file(
        io.BytesIO(result.body),
        mimetype=PDF_MIMETYPE,
        as_attachment=False,
        download_name=result.filename
    )
