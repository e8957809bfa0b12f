import unittest

import httpx

from muscleup.domain.errors import ExtractionServiceError
from muscleup.infra.text_extraction import TextExtractionClient
from muscleup.tests.samples import FAKE_PDF, FITTR_TEXT

URL = "http://extractor.test/extract"


def _client(handler, api_key=None):
    return TextExtractionClient(url=URL, api_key=api_key, timeout=5, transport=httpx.MockTransport(handler))


class TestTextExtractionClient(unittest.IsolatedAsyncioTestCase):

    async def test_json_response(self):
        seen = {}

        def handler(request):
            seen["request"] = request
            return httpx.Response(200, json={"text": FITTR_TEXT})

        text = await _client(handler, api_key="secret").extract_text(FAKE_PDF, "fittr.pdf")
        self.assertEqual(text, FITTR_TEXT)
        request = seen["request"]
        self.assertEqual(request.method, "POST")
        self.assertEqual(str(request.url), URL)
        self.assertEqual(request.headers["Authorization"], "Bearer secret")
        self.assertIn(b'filename="fittr.pdf"', request.content)
        self.assertIn(FAKE_PDF, request.content)

    async def test_plain_text_response(self):
        def handler(request):
            self.assertNotIn("Authorization", request.headers)
            return httpx.Response(200, text="Breakfast\n")

        self.assertEqual(await _client(handler).extract_text(FAKE_PDF), "Breakfast\n")

    async def test_http_error_status(self):
        client = _client(lambda request: httpx.Response(503, text="down"))
        with self.assertRaises(ExtractionServiceError) as ctx:
            await client.extract_text(FAKE_PDF)
        self.assertIn("503", str(ctx.exception))

    async def test_empty_text(self):
        for response in (httpx.Response(200, text="  \n"), httpx.Response(200, json={"text": ""}),
                         httpx.Response(200, json={"pages": []})):
            with self.subTest(body=response.content):
                client = _client(lambda request, r=response: r)
                with self.assertRaises(ExtractionServiceError):
                    await client.extract_text(FAKE_PDF)

    async def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(ExtractionServiceError):
            await _client(handler).extract_text(FAKE_PDF)


if __name__ == '__main__':
    unittest.main()
