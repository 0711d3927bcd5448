#!/usr/bin/env python3
"""
Simple test script to verify match card functionality without a browser
"""

import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from matchcard.card import build_card_view, render_card_html
from matchcard.errors import InvalidRequestError
from matchcard.main import create_app
from matchcard.models import parse_match_card_request


class StubRenderer:
    def render(self, markup):
        return b'%PDF-1.4 stub'


def test_validation():
    """Test validation functionality"""
    print("Testing validation functionality...")

    request = parse_match_card_request({
        'divisionName': 'U12',
        'currentTeamName': 'Lions',
        'teamPlayers': [{'first_name': 'Jo', 'last_name': 'Smith', 'reserve': False}],
    })
    assert request.currentTeamName == 'Lions'
    print("✓ Valid payload accepted")

    try:
        parse_match_card_request({'currentTeamName': 'Lions', 'teamPlayers': []})
    except InvalidRequestError:
        print("✓ Missing divisionName rejected")
    else:
        raise AssertionError("Missing divisionName was accepted")


def test_markup():
    """Test card markup"""
    print("\nTesting card markup...")

    request = parse_match_card_request({
        'divisionName': 'U12',
        'currentTeamName': 'Lions',
        'teamPlayers': [{'first_name': 'Jo', 'last_name': 'Smith', 'reserve': False}],
    })
    html = render_card_html(build_card_view(request))
    assert html.count('class="playerRow rosterRow"') == 25
    assert 'Smith, Jo' in html
    print("✓ 25 roster rows rendered")


def test_endpoint():
    """Test the HTTP endpoint with a stub renderer"""
    print("\nTesting /api/pdf endpoint...")

    app = create_app(config_overrides={'TESTING': True, 'RATELIMIT_ENABLED': False}, renderer=StubRenderer())
    client = app.test_client()

    response = client.post('/api/pdf', json={'divisionName': 'U12', 'currentTeamName': 'Lions', 'teamPlayers': []})
    assert response.status_code == 200
    assert response.mimetype == 'application/pdf'
    print("✓ PDF returned")

    response = client.post('/api/pdf', json={'teamPlayers': []})
    assert response.status_code == 400
    print("✓ Invalid body rejected")


def main():
    """Run all tests"""
    print("Match Card - Functionality Test")
    print("=" * 50)

    try:
        test_validation()
        test_markup()
        test_endpoint()

        print("\n" + "=" * 50)
        print("✓ All tests passed!")

    except Exception as e:
        print(f"\n✗ Test failed: {e}")
        import traceback
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
