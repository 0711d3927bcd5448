import unittest

# Add the project root to the path
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from matchcard.errors import RenderingError
from matchcard.handlers import CardResponse, handle_match_card


class RecordingRenderer:
    def __init__(self, result=b'%PDF-1.4 test', error=None):
        self.result = result
        self.error = error
        self.calls = []

    def render(self, markup):
        self.calls.append(markup)
        if self.error:
            raise self.error
        return self.result


VALID_PAYLOAD = {
    'divisionName': 'U12',
    'currentTeamName': 'Lions',
    'teamPlayers': [{'first_name': 'Jo', 'last_name': 'Smith', 'reserve': False}],
}


class TestHandleMatchCard(unittest.TestCase):
    def test_success(self):
        renderer = RecordingRenderer()
        response = handle_match_card(VALID_PAYLOAD, renderer, locale='fr')

        self.assertIsInstance(response, CardResponse)
        self.assertEqual(response.status, 200)
        self.assertEqual(response.content_type, 'application/pdf')
        self.assertEqual(response.body, b'%PDF-1.4 test')
        self.assertEqual(response.filename, 'match-card-lions.pdf')
        self.assertEqual(len(renderer.calls), 1)
        self.assertIn('Smith, Jo', renderer.calls[0])

    def test_invalid_body_never_renders(self):
        """Validation failures stop before the browser is involved"""
        renderer = RecordingRenderer()
        for payload in [None, {}, {'divisionName': 'U12', 'teamPlayers': []},
                        dict(VALID_PAYLOAD, teamPlayers=[{'last_name': 'Smith', 'reserve': False}])]:
            with self.subTest(payload=payload):
                response = handle_match_card(payload, renderer)
                self.assertEqual(response.status, 400)
                self.assertEqual(response.content_type, 'application/json')
                self.assertEqual(response.body, {'success': False, 'errors': ['invalid request body']})
        self.assertEqual(renderer.calls, [])

    def test_rendering_failure(self):
        renderer = RecordingRenderer(error=RenderingError(details="Executable doesn't exist"))
        response = handle_match_card(VALID_PAYLOAD, renderer)

        self.assertEqual(response.status, 500)
        self.assertEqual(response.body, {'success': False, 'errors': ['internal failure']})
        self.assertIsNone(response.filename)

    def test_unexpected_failure(self):
        """Anything else is logged and reported with the same generic message"""
        renderer = RecordingRenderer(error=RuntimeError("boom"))
        with self.assertLogs('matchcard.handlers', level='ERROR'):
            response = handle_match_card(VALID_PAYLOAD, renderer)

        self.assertEqual(response.status, 500)
        self.assertEqual(response.body, {'success': False, 'errors': ['internal failure']})
        self.assertNotIn('boom', str(response.body))


if __name__ == '__main__':
    unittest.main()
