#!/usr/bin/env python3
"""
Render a match card from a JSON payload file, without running the server.

The file holds the same body the /api/pdf endpoint accepts.

Usage:
    python render_card.py payload.json -o card.pdf
    python render_card.py payload.json -o card.html --html    # markup only, no browser
    python render_card.py payload.json -o card.pdf --locale en
"""

import argparse
import json
import sys
from pathlib import Path

from matchcard.card import build_card_view, generate_match_card_pdf, render_card_html
from matchcard.config import setup_logging
from matchcard.errors import InvalidRequestError, RenderingError
from matchcard.models import parse_match_card_request
from matchcard.pdf import PDFRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="render_card",
        description="Render a team roster JSON file as a match card",
    )
    parser.add_argument("payload", type=Path, help="JSON file with the match card request body")
    parser.add_argument("-o", "--output", type=Path, required=True, help="Where to write the PDF (or HTML)")
    parser.add_argument("--html", action="store_true", help="Write the card markup instead of a PDF")
    parser.add_argument("--locale", default=None, help="Card language: fr (default) or en")
    return parser


def write_output(path: Path, data) -> bool:
    """Write text or bytes to path, reporting failures on stderr"""
    try:
        if isinstance(data, bytes):
            path.write_bytes(data)
        else:
            path.write_text(data, encoding="utf-8")
    except OSError as e:
        print(f"ERROR: Could not write {path}: {e}", file=sys.stderr)
        return False
    return True


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        payload = json.loads(args.payload.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"ERROR: Could not read {args.payload}: {e}", file=sys.stderr)
        return 1

    try:
        request = parse_match_card_request(payload)
    except InvalidRequestError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        for error in e.details or []:
            location = ".".join(str(part) for part in error.get('loc', ()))
            print(f"  {location or '<body>'}: {error.get('msg')}", file=sys.stderr)
        return 1

    if args.html:
        html = render_card_html(build_card_view(request, locale=args.locale))
        if not write_output(args.output, html):
            return 1
        print(f"✓ Match card markup written to {args.output}")
        return 0

    try:
        pdf_bytes = generate_match_card_pdf(request, PDFRenderer.from_config(), locale=args.locale)
    except RenderingError as e:
        print(f"ERROR: PDF rendering failed: {e.details}", file=sys.stderr)
        return 1

    if not write_output(args.output, pdf_bytes):
        return 1
    print(f"✓ Match card PDF written to {args.output} ({len(pdf_bytes)} bytes)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
