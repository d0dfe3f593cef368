"""
Registre en mémoire des sessions d'édition exposées par le router.
Une session = un EmailEditor ouvert, identifié par un uuid hex.

Les endpoints synchrones tournent dans le threadpool de FastAPI : chaque
session porte son propre verrou, pris pendant toute mutation (`locked`).
Les sessions inactives depuis plus de EMAIL_BUILDER_SESSION_TTL secondes
sont purgées, et le registre ne dépasse jamais EMAIL_BUILDER_MAX_SESSIONS.
"""
import logging
import os
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Lock
from typing import Callable, Dict, Iterator, Optional

from .controller import EmailEditor

log = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass
class _Session:
    editor: EmailEditor
    last_used: float
    lock: Lock = field(default_factory=Lock)


class SessionStore:
    def __init__(
        self,
        ttl: Optional[float] = None,
        max_sessions: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl if ttl is not None else _env_int("EMAIL_BUILDER_SESSION_TTL", 3600)
        self.max_sessions = (
            max_sessions if max_sessions is not None
            else _env_int("EMAIL_BUILDER_MAX_SESSIONS", 500)
        )
        self._clock = clock
        self._sessions: Dict[str, _Session] = {}
        self._lock = Lock()

    def open(self, initial_html: Optional[str] = None, lang: Optional[str] = None) -> str:
        sid = uuid.uuid4().hex
        editor = EmailEditor(lang=lang)
        editor.open(initial_html)
        with self._lock:
            self._evict()
            self._sessions[sid] = _Session(editor=editor, last_used=self._clock())
        log.info("Session %s créée", sid)
        return sid

    def get(self, sid: str) -> Optional[EmailEditor]:
        with self._lock:
            session = self._live(sid)
        return session.editor if session else None

    @contextmanager
    def locked(self, sid: str) -> Iterator[Optional[EmailEditor]]:
        """
        Donne l'éditeur de la session sous son verrou, None si absente/expirée.

        Usage:
            with store.locked(sid) as editor:
                editor.insert("text")
        """
        with self._lock:
            session = self._live(sid)
        if session is None:
            yield None
            return
        with session.lock:
            session.last_used = self._clock()
            yield session.editor

    def close(self, sid: str) -> Optional[EmailEditor]:
        """Retire la session du registre (après save ou cancel)."""
        with self._lock:
            session = self._sessions.pop(sid, None)
        return session.editor if session else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    # ── Purge (appelée sous self._lock) ──────────────────────────────────────

    def _live(self, sid: str) -> Optional[_Session]:
        session = self._sessions.get(sid)
        if session is not None and self._expired(session):
            del self._sessions[sid]
            log.info("Session %s expirée", sid)
            return None
        return session

    def _expired(self, session: _Session) -> bool:
        return self._clock() - session.last_used >= self.ttl

    def _evict(self) -> None:
        expired = [sid for sid, s in self._sessions.items() if self._expired(s)]
        for sid in expired:
            del self._sessions[sid]

        # Place pour la session entrante : les moins récemment utilisées partent
        overflow = len(self._sessions) - self.max_sessions + 1
        if overflow > 0:
            oldest = sorted(self._sessions, key=lambda k: self._sessions[k].last_used)
            for sid in oldest[:overflow]:
                del self._sessions[sid]
            expired += oldest[:overflow]

        if expired:
            log.debug("%d session(s) purgée(s)", len(expired))


store = SessionStore()
