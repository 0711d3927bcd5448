#!/usr/bin/env python3
"""
Pre-flight Check Script for Production Deployment
Validates the environment, the browser used for rendering and application startup
Exits with non-zero code if any check fails

Usage:
    python scripts/preflight_check.py            # configuration + browser discovery
    python scripts/preflight_check.py --render   # also print a blank match card
"""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def check_flask_env():
    """Warn when not running in production mode"""
    flask_env = os.environ.get('FLASK_ENV', '').strip()
    if flask_env.lower() == 'production':
        print(f"✅ FLASK_ENV: {flask_env} (production mode)")
    else:
        print(f"⚠️  WARNING: FLASK_ENV is not set to 'production' (current: '{flask_env}')")
        print("   HTTPS forcing and HSTS will be disabled")
    return True


def check_locale():
    """CARD_LOCALE must name a known label set"""
    from matchcard.labels import LABELS
    locale = os.environ.get('CARD_LOCALE', 'fr').strip().lower() or 'fr'
    if locale not in LABELS:
        print(f"❌ ERROR: CARD_LOCALE '{locale}' is not supported (choose from: {', '.join(sorted(LABELS))})", file=sys.stderr)
        return False
    print(f"✅ CARD_LOCALE: {locale}")
    return True


def check_browser():
    """Check that a Chromium executable can be found"""
    from matchcard.pdf import resolve_launch_options
    options = resolve_launch_options()
    executable = options['executable_path']

    if executable:
        if not os.path.exists(executable):
            print(f"❌ ERROR: Chromium executable not found at {executable}", file=sys.stderr)
            return False
        print(f"✅ Chromium executable: {executable}")
        return True

    try:
        from playwright.sync_api import sync_playwright
        with sync_playwright() as p:
            bundled = p.chromium.executable_path
    except Exception as e:
        print(f"❌ ERROR: Playwright could not start: {e}", file=sys.stderr)
        return False

    if not bundled or not os.path.exists(bundled):
        print("❌ ERROR: No Chromium available. Install one with: python -m playwright install chromium", file=sys.stderr)
        return False
    print(f"✅ Playwright bundled Chromium: {bundled}")
    return True


def check_render():
    """Print a blank card end to end"""
    from matchcard.card import generate_match_card_pdf
    from matchcard.errors import RenderingError
    from matchcard.models import parse_match_card_request
    from matchcard.pdf import PDFRenderer

    request = parse_match_card_request({
        'divisionName': 'Preflight',
        'currentTeamName': 'Preflight',
        'teamPlayers': [],
    })
    try:
        pdf_bytes = generate_match_card_pdf(request, PDFRenderer.from_config())
    except RenderingError as e:
        print(f"❌ ERROR: Test render failed: {e.details}", file=sys.stderr)
        return False

    if not pdf_bytes.startswith(b'%PDF'):
        print("❌ ERROR: Test render did not produce a PDF", file=sys.stderr)
        return False
    print(f"✅ Test render produced a {len(pdf_bytes)} byte PDF")
    return True


def check_app_import():
    """Check if application can be imported and initialized"""
    try:
        from matchcard.main import create_app
        create_app()
        print("✅ Application imports and initializes successfully")
        return True
    except Exception as e:
        print(f"❌ ERROR: Application import/initialization failed: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return False


def main():
    """Run all pre-flight checks"""
    print("=" * 60)
    print("Match Card Pre-Flight Check")
    print("=" * 60)
    print()

    all_passed = True

    print("Checking configuration...")
    all_passed &= check_flask_env()
    all_passed &= check_locale()
    print()

    print("Checking browser...")
    all_passed &= check_browser()
    if '--render' in sys.argv[1:]:
        all_passed &= check_render()
    print()

    print("Checking application initialization...")
    all_passed &= check_app_import()
    print()

    # Summary
    print("=" * 60)
    if all_passed:
        print("✅ All pre-flight checks passed!")
        print("   Application is ready for production deployment.")
        return 0
    else:
        print("❌ Pre-flight checks FAILED")
        print("   Please fix the errors above before deploying.")
        return 1


if __name__ == '__main__':
    sys.exit(main())
