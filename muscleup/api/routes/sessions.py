import logging
from urllib.parse import quote

from fastapi import APIRouter, File, HTTPException, Response, UploadFile

from muscleup.domain.PlanSession import PlanSession
from muscleup.domain.errors import (
    CompositionError,
    ExtractionError,
    ExtractionServiceError,
    InputError,
    NoExtractedDataError,
    PlanReportError,
    SessionBusyError,
)
from muscleup.infra.Session_Repository import SessionRepository
from muscleup.infra.text_extraction import TextExtractionClient
from muscleup.utilities.config import LOGO_PATH
from muscleup.utilities.validators import ClientInfoInput, ExtractedTextInput

router = APIRouter(prefix="/api/sessions", tags=["sessions"])
logger = logging.getLogger(__name__)

# Most specific first
ERROR_STATUS = (
    (SessionBusyError, 409),
    (InputError, 400),
    (NoExtractedDataError, 422),
    (ExtractionServiceError, 502),
    (ExtractionError, 422),
    (CompositionError, 422),
)


def _new_session() -> PlanSession:
    return PlanSession(extractor=TextExtractionClient(), logo_path=LOGO_PATH)


repository = SessionRepository(factory=_new_session)


def _get_session(session_id: str) -> PlanSession:
    session = repository.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _to_http(exc: PlanReportError) -> HTTPException:
    for exc_type, status in ERROR_STATUS:
        if isinstance(exc, exc_type):
            return HTTPException(status_code=status, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


@router.post("", status_code=201)
def create_session():
    session = repository.create()
    return {"session_id": session.session_id}


@router.get("/{session_id}")
def read_session(session_id: str):
    return _get_session(session_id).to_dict()


@router.delete("/{session_id}")
def delete_session(session_id: str):
    if not repository.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "deleted"}


@router.put("/{session_id}/client")
def update_client(session_id: str, payload: ClientInfoInput):
    session = _get_session(session_id)
    try:
        client = session.set_client(payload.name, payload.weight, payload.week)
    except PlanReportError as e:
        raise _to_http(e) from e
    return client.to_dict()


@router.post("/{session_id}/document")
async def upload_document(session_id: str, file: UploadFile = File(None)):
    """Pick step: extract the uploaded Fittr PDF and replace the meal ledger."""
    session = _get_session(session_id)
    data = await file.read() if file is not None else None
    filename = (file.filename if file is not None else None) or "plan.pdf"
    try:
        await session.load_document(data, filename)
    except PlanReportError as e:
        logger.info(f"Document extraction failed for session {session_id}: {e}")
        raise _to_http(e) from e
    return {"status": "success", "message": "Details extracted from Fittr PDF successfully!",
            **session.to_dict()}


@router.post("/{session_id}/text")
def upload_text(session_id: str, payload: ExtractedTextInput):
    session = _get_session(session_id)
    try:
        session.load_text(payload.text)
    except PlanReportError as e:
        logger.info(f"Text extraction failed for session {session_id}: {e}")
        raise _to_http(e) from e
    return {"status": "success", **session.to_dict()}


@router.get("/{session_id}/report")
def download_report(session_id: str):
    """Compose the MuscleUp report and hand it over as an attachment."""
    session = _get_session(session_id)
    try:
        filename, pdf_bytes = session.generate_document()
    except PlanReportError as e:
        logger.info(f"Report generation failed for session {session_id}: {e}")
        raise _to_http(e) from e
    ascii_name = filename.encode("ascii", "ignore").decode("ascii").replace('"', "")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
        },
    )
