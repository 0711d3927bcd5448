"""
Match Card - Flask Application

Copyright (c) 2025 [Your Name]. All Rights Reserved.
This software is proprietary and confidential. Unauthorized copying, modification,
distribution, or use of this software, via any medium, is strictly prohibited.
"""

import os
import sys

from flask import Flask, jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_talisman import Talisman
from werkzeug.middleware.proxy_fix import ProxyFix

from . import config
from .pdf import PDFRenderer
from .routes import bp


def create_app(config_overrides=None, renderer=None):
    """Create and configure the Flask application

    Args:
        config_overrides: Extra Flask config values, applied last
        renderer: Object with ``render(markup) -> bytes``; defaults to a
            Chromium-backed PDFRenderer built from the environment
    """
    config.setup_logging()
    app = Flask(__name__)

    # Configuration
    app.json.ensure_ascii = False
    app.config['MAX_CONTENT_LENGTH'] = config.MAX_CONTENT_LENGTH
    app.config['PDF_RATE_LIMIT'] = config.PDF_RATE_LIMIT
    app.config['RATELIMIT_ENABLED'] = config.RATELIMIT_ENABLED
    app.config['CARD_LOCALE'] = config.CARD_LOCALE
    if config_overrides:
        app.config.update(config_overrides)

    # Security: Initialize rate limiting (each card launches a browser)
    limiter = Limiter(
        key_func=get_remote_address,
        app=app,
        default_limits=[],
        storage_uri="memory://"
    )
    # The blueprint only holds /api/pdf
    limiter.limit(lambda: app.config['PDF_RATE_LIMIT'])(bp)
    if app.config['RATELIMIT_ENABLED']:
        app.logger.info(f"Rate limiting enabled: {app.config['PDF_RATE_LIMIT']} on /api/pdf")

    # Security: Initialize security headers
    is_production = config.is_production()
    Talisman(
        app,
        force_https=is_production,
        strict_transport_security=is_production,
        strict_transport_security_max_age=31536000,
        strict_transport_security_include_subdomains=True,
        content_security_policy={'default-src': "'self'"},
        frame_options='DENY',
        referrer_policy='strict-origin-when-cross-origin'
    )

    # Security: Handle reverse proxy headers (X-Forwarded-*)
    num_proxies = int(os.environ.get('PROXY_FIX_NUM_PROXIES', '1'))
    if num_proxies > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=num_proxies, x_proto=num_proxies, x_host=num_proxies)
        app.logger.info(f"ProxyFix enabled with {num_proxies} proxy(ies)")

    app.extensions['pdf_renderer'] = renderer if renderer is not None else PDFRenderer.from_config()

    # Register blueprints
    app.register_blueprint(bp)

    # Production: Health check endpoint
    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint for load balancers and monitoring"""
        return jsonify({
            'status': 'healthy',
            'service': 'matchcard'
        }), 200

    # Errors are always JSON - this service has no HTML pages
    @app.errorhandler(404)
    def handle_404_error(e):
        return jsonify({'success': False, 'errors': ['Endpoint not found']}), 404

    @app.errorhandler(405)
    def handle_405_error(e):
        return jsonify({'success': False, 'errors': ['Method not allowed']}), 405

    @app.errorhandler(413)
    def handle_413_error(e):
        app.logger.warning(f"Request body over {app.config['MAX_CONTENT_LENGTH']} bytes rejected")
        return jsonify({'success': False, 'errors': ['invalid request body']}), 413

    @app.errorhandler(429)
    def handle_429_error(e):
        app.logger.warning(f"Rate limit exceeded: {e.description}")
        return jsonify({'success': False, 'errors': ['Too many requests. Please try again later.']}), 429

    @app.errorhandler(500)
    def handle_500_error(e):
        """Return JSON for server errors - sanitized to prevent information leakage"""
        original = getattr(e, 'original_exception', None) or e
        app.logger.error(f"500 error: {original}", exc_info=original)
        return jsonify({'success': False, 'errors': ['internal failure']}), 500

    return app


def main():
    """Main entry point - Development only"""
    # Security: Prevent running Flask dev server in production
    if config.is_production():
        print("ERROR: Flask development server cannot run in production mode.")
        print("Use gunicorn or another production WSGI server instead:")
        print("  gunicorn -c gunicorn.conf.py wsgi:app")
        sys.exit(1)

    app = create_app()

    print("Match Card service starting in DEVELOPMENT mode...")
    print("POST a roster to http://127.0.0.1:8080/api/pdf")
    print("Press Ctrl+C to stop the application")
    print()
    print("WARNING: This is the development server. For production, use:")
    print("  gunicorn -c gunicorn.conf.py wsgi:app")

    try:
        app.run(host='127.0.0.1', port=8080, debug=False)
    except KeyboardInterrupt:
        print("\nShutting down Match Card service...")


if __name__ == '__main__':
    main()
