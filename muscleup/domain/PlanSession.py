"""PlanSession: one user's working state (client fields + current ledger).

Actions run one at a time per session; a second action started while one is
in flight is refused with SessionBusyError. The ledger is only replaced by a
successful extraction, and totals are always recomputed from it.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from threading import Lock
from typing import Optional, Tuple
from uuid import uuid4

from muscleup.domain.ClientInfo import ClientInfo
from muscleup.domain.MealLedger import MealLedger
from muscleup.domain.PlanTotals import PlanTotals
from muscleup.domain.errors import InputError, NoExtractedDataError, SessionBusyError
from muscleup.infra.pdf_utils import compose_plan_pdf, report_filename
from muscleup.logic.extraction.parser import extract_meal_ledger
from muscleup.logic.reporting.totals import compute_plan_totals
from muscleup.utilities.constants import PDF_MAGIC

logger = logging.getLogger(__name__)


class PlanSession:
    def __init__(self, extractor=None, logo_path: Optional[Path] = None, session_id: Optional[str] = None):
        self.session_id = session_id or uuid4().hex
        self.client = ClientInfo()
        self.ledger = MealLedger()
        self.extractor = extractor
        self.logo_path = logo_path
        self._lock = Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @property
    def totals(self) -> PlanTotals:
        return compute_plan_totals(self.ledger)

    @contextmanager
    def _action(self, name: str):
        # sync routes run in a threadpool, so test-and-set must be atomic
        if not self._lock.acquire(blocking=False):
            raise SessionBusyError("Another action is still running. Please wait for it to finish.")
        logger.debug(f"Session {self.session_id}: {name} started")
        try:
            yield
        finally:
            self._lock.release()

    def set_client(self, name="", weight="", week="") -> ClientInfo:
        with self._action("set_client"):
            self.client = ClientInfo(name, weight, week)
            return self.client

    async def load_document(self, pdf_bytes: Optional[bytes], filename: str = "plan.pdf") -> MealLedger:
        """Send the picked PDF through the extraction service and replace the ledger."""
        with self._action("load_document"):
            if not pdf_bytes:
                raise InputError("No document selected. Please pick a Fittr PDF document.")
            if not pdf_bytes.lstrip().startswith(PDF_MAGIC):
                raise InputError("The selected file is not a PDF document.")
            if self.extractor is None:
                raise InputError("Document upload is not available; paste the extracted text instead.")
            text = await self.extractor.extract_text(pdf_bytes, filename)
            return self._replace_ledger(text)

    def load_text(self, text: Optional[str]) -> MealLedger:
        """Parse already-extracted text and replace the ledger."""
        with self._action("load_text"):
            return self._replace_ledger(text)

    def _replace_ledger(self, text: Optional[str]) -> MealLedger:
        ledger = extract_meal_ledger(text)
        if ledger.is_empty():
            raise NoExtractedDataError("No extracted data: no meal items were found in the document.")
        self.ledger = ledger
        logger.info(f"Session {self.session_id}: ledger replaced ({ledger.entry_count()} entries)")
        return ledger

    def generate_document(self) -> Tuple[str, bytes]:
        """Compose the report; returns (file name, PDF bytes)."""
        with self._action("generate_document"):
            data = compose_plan_pdf(self.client, self.totals, self.ledger, self.logo_path)
            return report_filename(self.client), data

    def to_dict(self):
        return {
            "session_id": self.session_id,
            "client": self.client.to_dict(),
            "ledger": self.ledger.to_dict(),
            "totals": self.totals.formatted(),
            "entry_count": self.ledger.entry_count(),
            "busy": self.busy,
        }
