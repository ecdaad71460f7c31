"""Server-side sessions.

The browser cookie only carries a signed session id. Session data (the
logged-in ``user_id`` and ``role``) lives in a :class:`SessionStore` that
is injected into the app factory, so nothing about sessions is held in
module globals.

Usage:
    store = MemorySessionStore(ttl_seconds=3600)
    app.session_interface = ServerSideSessionInterface(store)
"""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass
from threading import RLock
from typing import Dict, Optional

from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from werkzeug.datastructures import CallbackDict


class SessionStore:
    """Interface for session persistence keyed by session id."""

    def get(self, sid: str) -> Optional[dict]:
        raise NotImplementedError

    def set(self, sid: str, data: dict, ttl_seconds: Optional[int] = None) -> None:
        raise NotImplementedError

    def destroy(self, sid: str) -> None:
        raise NotImplementedError

    def new_sid(self) -> str:
        return secrets.token_urlsafe(32)


@dataclass
class _Entry:
    data: dict
    expires_at: float


class MemorySessionStore(SessionStore):
    """In-process session store with per-entry expiry.

    - Thread-safe
    - Lost on restart (everyone has to log in again)
    """

    def __init__(self, ttl_seconds: int = 43200, max_items: int = 10000):
        self._ttl = max(1, int(ttl_seconds))
        self._max = max(64, int(max_items))
        self._data: Dict[str, _Entry] = {}
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            self._prune_locked()
            return len(self._data)

    def get(self, sid: str) -> Optional[dict]:
        now = time.time()
        with self._lock:
            entry = self._data.get(sid)
            if not entry:
                return None
            if entry.expires_at <= now:
                self._data.pop(sid, None)
                return None
            return dict(entry.data)

    def set(self, sid: str, data: dict, ttl_seconds: Optional[int] = None) -> None:
        ttl = self._ttl if ttl_seconds is None else max(1, int(ttl_seconds))
        expires_at = time.time() + ttl
        with self._lock:
            if sid not in self._data and len(self._data) >= self._max:
                self._prune_locked()
                if len(self._data) >= self._max:
                    # drop the entry closest to expiry
                    oldest = min(self._data, key=lambda k: self._data[k].expires_at)
                    self._data.pop(oldest, None)
            self._data[sid] = _Entry(data=dict(data), expires_at=expires_at)

    def destroy(self, sid: str) -> None:
        with self._lock:
            self._data.pop(sid, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def _prune_locked(self) -> None:
        now = time.time()
        expired = [k for k, v in self._data.items() if v.expires_at <= now]
        for k in expired:
            self._data.pop(k, None)


class ServerSession(CallbackDict, SessionMixin):
    """Session dict that remembers its id and whether it changed."""

    def __init__(self, initial=None, sid: Optional[str] = None, new: bool = False):
        def on_update(self):
            self.modified = True

        super().__init__(initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False


class ServerSideSessionInterface(SessionInterface):
    """Flask session interface backed by a :class:`SessionStore`."""

    session_class = ServerSession
    salt = 'frontdesk-session'

    def __init__(self, store: SessionStore):
        self.store = store

    def _signer(self, app) -> Optional[Signer]:
        if not app.secret_key:
            return None
        return Signer(app.secret_key, salt=self.salt)

    def _new_session(self) -> ServerSession:
        return self.session_class(sid=self.store.new_sid(), new=True)

    def open_session(self, app, request):
        signer = self._signer(app)
        if signer is None:
            return None

        cookie = request.cookies.get(self.get_cookie_name(app))
        if not cookie:
            return self._new_session()

        try:
            sid = signer.unsign(cookie).decode('utf-8')
        except BadSignature:
            return self._new_session()

        data = self.store.get(sid)
        if data is None:
            # Unknown or expired id: never adopt an id the server did not issue.
            return self._new_session()
        return self.session_class(data, sid=sid)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if not session:
            if session.modified:
                self.store.destroy(session.sid)
                if not session.new:
                    response.delete_cookie(name, domain=domain, path=path)
            return

        if not self.should_set_cookie(app, session):
            return

        lifetime = int(app.permanent_session_lifetime.total_seconds())
        self.store.set(session.sid, dict(session), ttl_seconds=lifetime)

        signed = self._signer(app).sign(session.sid.encode('utf-8')).decode('utf-8')
        response.set_cookie(
            name,
            signed,
            expires=self.get_expiration_time(app, session),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )

    def regenerate(self, session) -> None:
        """Move ``session`` to a fresh id, discarding the old stored record."""
        if not session.new:
            self.store.destroy(session.sid)
        session.sid = self.store.new_sid()
        session.modified = True
