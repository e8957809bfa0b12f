import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from muscleup.api.api_run import app
from muscleup.api.routes import sessions
from muscleup.domain.PlanSession import PlanSession
from muscleup.domain.errors import ExtractionServiceError
from muscleup.infra.Session_Repository import SessionRepository
from muscleup.tests.samples import FAKE_PDF, FITTR_TEXT, NO_ITEMS_TEXT, FakeExtractor
from muscleup.utilities.config import STATIC_DIR


class TestSessionsAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self.extractor = FakeExtractor()
        repo = SessionRepository(
            factory=lambda: PlanSession(extractor=self.extractor, logo_path=STATIC_DIR / "logo.png"))
        patcher = patch.object(sessions, "repository", repo)
        patcher.start()
        self.addCleanup(patcher.stop)
        resp = self.client.post('/api/sessions')
        self.assertEqual(resp.status_code, 201)
        self.sid = resp.json()['session_id']

    def _upload(self, content=FAKE_PDF, name="fittr.pdf"):
        return self.client.post(f'/api/sessions/{self.sid}/document',
                                files={"file": (name, content, "application/pdf")})

    def test_new_session_is_empty(self):
        data = self.client.get(f'/api/sessions/{self.sid}').json()
        self.assertEqual(data['entry_count'], 0)
        self.assertEqual(list(data['ledger']), ["Breakfast", "Lunch", "Snacks", "Dinner"])
        self.assertEqual(data['totals']['calories'], "0.00")

    def test_unknown_session(self):
        self.assertEqual(self.client.get('/api/sessions/nope').status_code, 404)
        self.assertEqual(self.client.delete('/api/sessions/nope').status_code, 404)

    def test_upload_document(self):
        resp = self._upload()
        self.assertEqual(resp.status_code, 200, resp.text)
        data = resp.json()
        self.assertEqual(data['entry_count'], 5)
        self.assertEqual(data['ledger']['Breakfast'][0]['food'], "Oats")
        self.assertEqual(data['totals'], {"calories": "1046.00", "protein": "83.80",
                                          "carbs": "73.80", "fats": "41.70"})
        self.assertEqual(self.extractor.calls[0], (FAKE_PDF, "fittr.pdf"))

    def test_upload_rejects_non_pdf_and_empty(self):
        self.assertEqual(self._upload(b"hello", "notes.txt").status_code, 400)
        resp = self._upload(b"")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("No document selected", resp.json()['detail'])

    def test_service_failure_keeps_ledger(self):
        self._upload()
        self.extractor.error = ExtractionServiceError("Could not reach the text extraction service.")
        resp = self._upload()
        self.assertEqual(resp.status_code, 502)
        self.assertIn("extraction service", resp.json()['detail'])
        self.assertEqual(self.client.get(f'/api/sessions/{self.sid}').json()['entry_count'], 5)

    def test_text_without_items(self):
        resp = self.client.post(f'/api/sessions/{self.sid}/text', json={"text": NO_ITEMS_TEXT})
        self.assertEqual(resp.status_code, 422)
        self.assertIn("No extracted data", resp.json()['detail'])

    def test_exponent_number_does_not_break_session(self):
        self.client.post(f'/api/sessions/{self.sid}/text', json={"text": FITTR_TEXT})
        resp = self.client.post(f'/api/sessions/{self.sid}/text',
                                json={"text": "Breakfast\nOats  80 gm  1e9999999 kcl  10g  40g  8g\n"})
        self.assertEqual(resp.status_code, 422)
        follow_up = self.client.get(f'/api/sessions/{self.sid}')
        self.assertEqual(follow_up.status_code, 200)
        self.assertEqual(follow_up.json()['totals']['calories'], "1046.00")

    def test_update_client(self):
        resp = self.client.put(f'/api/sessions/{self.sid}/client',
                               json={"name": "  Jane Doe ", "weight": 150, "week": 2})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"name": "Jane Doe", "weight": "150", "week": "2"})

    def test_report_requires_client_fields(self):
        self.client.post(f'/api/sessions/{self.sid}/text', json={"text": FITTR_TEXT})
        resp = self.client.get(f'/api/sessions/{self.sid}/report')
        self.assertEqual(resp.status_code, 422)
        self.assertIn("client name", resp.json()['detail'])

    def test_download_report(self):
        self.client.post(f'/api/sessions/{self.sid}/text', json={"text": FITTR_TEXT})
        self.client.put(f'/api/sessions/{self.sid}/client',
                        json={"name": "Jane Doe", "weight": "150", "week": "3"})
        resp = self.client.get(f'/api/sessions/{self.sid}/report')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers['content-type'], "application/pdf")
        self.assertIn('filename="Jane Doe_Diet_Week_3.pdf"', resp.headers['content-disposition'])
        self.assertTrue(resp.content.startswith(b"%PDF"))

    def test_delete_session(self):
        self.assertEqual(self.client.delete(f'/api/sessions/{self.sid}').status_code, 200)
        self.assertEqual(self.client.get(f'/api/sessions/{self.sid}').status_code, 404)

    def test_health(self):
        resp = self.client.get('/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['sessions'], 1)


if __name__ == '__main__':
    unittest.main()
