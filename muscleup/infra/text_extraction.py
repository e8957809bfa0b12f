"""Client for the external PDF -> text conversion service.

Contract: POST the file as multipart field ``file``; the service answers with
``{"text": "..."}`` or a plain-text body. No retries: any failure surfaces
immediately as ExtractionServiceError.
"""
import logging
from typing import Optional

import httpx

from muscleup.domain.errors import ExtractionServiceError
from muscleup.utilities.config import EXTRACTION_API_KEY, EXTRACTION_SERVICE_URL, EXTRACTION_TIMEOUT

logger = logging.getLogger(__name__)


class TextExtractionClient:
    def __init__(self, url: str = EXTRACTION_SERVICE_URL, api_key: Optional[str] = EXTRACTION_API_KEY,
                 timeout: float = EXTRACTION_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _headers(self):
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    async def extract_text(self, pdf_bytes: bytes, filename: str = "plan.pdf") -> str:
        """Send the document and return its plain text."""
        files = {"file": (filename, pdf_bytes, "application/pdf")}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, files=files, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning(f"Text extraction request to {self.url} failed: {e}")
            raise ExtractionServiceError("Could not reach the text extraction service. Please try again.") from e

        if response.status_code != 200:
            logger.warning(f"Text extraction service returned {response.status_code}: {response.text[:200]}")
            raise ExtractionServiceError(
                f"The text extraction service failed (HTTP {response.status_code})."
            )

        text = self._read_text(response)
        if not text.strip():
            raise ExtractionServiceError("The text extraction service returned no text for this document.")
        logger.info(f"Extracted {len(text)} characters from {filename}")
        return text

    @staticmethod
    def _read_text(response: httpx.Response) -> str:
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return response.text
        try:
            payload = response.json()
        except ValueError as e:
            raise ExtractionServiceError("The text extraction service sent an unreadable response.") from e
        text = payload.get("text") if isinstance(payload, dict) else None
        if not isinstance(text, str):
            raise ExtractionServiceError("The text extraction service response had no text.")
        return text


__all__ = ["TextExtractionClient"]
