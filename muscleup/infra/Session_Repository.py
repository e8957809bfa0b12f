"""In-memory registry of PlanSession objects (one per user session, nothing persisted)."""
import logging
from threading import Lock
from typing import Callable, Dict, Optional

from muscleup.domain.PlanSession import PlanSession

logger = logging.getLogger(__name__)


class SessionRepository:
    def __init__(self, factory: Callable[[], PlanSession] = PlanSession):
        self._factory = factory
        self._sessions: Dict[str, PlanSession] = {}
        self._lock = Lock()

    def create(self) -> PlanSession:
        session = self._factory()
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info(f"Created session {session.session_id}")
        return session

    def get(self, session_id: str) -> Optional[PlanSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info(f"Dropped session {session_id}")
        return removed is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
