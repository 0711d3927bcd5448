"""
WSGI entry point for gunicorn: gunicorn -c gunicorn.conf.py wsgi:app

The package is installed through pyproject.toml, so no path setup is needed.
"""

import os

# Production unless told otherwise (enables HTTPS forcing and HSTS)
os.environ.setdefault('FLASK_ENV', 'production')

from matchcard.main import create_app, main

# Chromium is located once, when the worker imports this module
app = create_app()

if __name__ == '__main__':
    # Development server only; refuses to start when FLASK_ENV is production
    main()
