# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""SessionNegotiator — resolves, persists, and destroys the session of each request.

Lifecycle of one request:

1. :meth:`SessionNegotiator.resolve` runs before the handler. It verifies the
   signed session cookie, loads the payload from the store, and attaches a
   live :class:`Session` to ``request.state.session``. Missing cookies, bad
   signatures, unknown ids, and expired sessions all yield a fresh session.
2. The handler reads and writes ``request.state.session``.
3. :meth:`SessionNegotiator.persist` runs before the response is sent. When
   :meth:`SessionNegotiator.should_save` agrees it stores the session and
   sets the signed cookie on the response.

Store failures propagate and fail the request; no cookie is set for it.
Store calls are awaited without a deadline, so a hung store stalls the
request; wrap the store if a timeout is needed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from flysession.config.properties.session import CookieProperties, SessionProperties
from flysession.kernel.exceptions import ConfigurationException, SessionNotFoundException
from flysession.session.adapters.memory import InMemorySessionStore
from flysession.session.cookie import SessionCookie
from flysession.session.dispatch import StoreDispatcher
from flysession.session.ports.outbound import ContextAwareSessionStore, SessionStore
from flysession.session.session import Session
from flysession.signing.key_store import SecretKeyStore
from flysession.signing.signer import SessionIdSigner

_logger = logging.getLogger(__name__)

_DEFAULT_COOKIE_NAME = "sessionId"
_FORWARDED_PROTO_HEADER = "x-forwarded-proto"


def _build_key_store(secret: str | Sequence[str] | SecretKeyStore | None) -> SecretKeyStore:
    if isinstance(secret, SecretKeyStore):
        return secret
    if secret is None or secret == "":
        raise ConfigurationException("The secret option is required", code="SESSION_SECRET_MISSING")
    return SecretKeyStore(secret)


def _build_cookie_properties(cookie: CookieProperties | Mapping[str, Any] | None) -> CookieProperties:
    if cookie is None:
        return CookieProperties()
    if isinstance(cookie, CookieProperties):
        return cookie
    return CookieProperties.model_validate({k.replace("-", "_"): v for k, v in cookie.items()})


class SessionNegotiator:
    """Runs the session protocol for a single cookie name and store.

    Args:
        secret: Signing secret (at least 32 characters), a sequence of
            secrets (first signs, the rest only verify), or a prepared
            :class:`SecretKeyStore`.
        store: Session store; defaults to a fresh :class:`InMemorySessionStore`
            owned by this negotiator.
        cookie_name: Name of the session cookie.
        cookie: Cookie attributes; ``secure`` defaults to ``True``.
        save_uninitialized: Whether sessions nobody wrote to are still saved.

    Raises:
        ConfigurationException: If no secret is given, the signing secret is
            too short, or the store lacks a required method.
    """

    def __init__(
        self,
        secret: str | Sequence[str] | SecretKeyStore | None,
        store: SessionStore | ContextAwareSessionStore | None = None,
        *,
        cookie_name: str = _DEFAULT_COOKIE_NAME,
        cookie: CookieProperties | Mapping[str, Any] | None = None,
        save_uninitialized: bool = True,
    ) -> None:
        self._key_store = _build_key_store(secret)
        self._signer = SessionIdSigner(self._key_store)
        self._store = store if store is not None else InMemorySessionStore()
        self._dispatcher = StoreDispatcher(self._store)
        self._cookie_name = cookie_name or _DEFAULT_COOKIE_NAME
        self._cookie = _build_cookie_properties(cookie)
        self._save_uninitialized = save_uninitialized

    @classmethod
    def from_properties(
        cls,
        properties: SessionProperties,
        store: SessionStore | ContextAwareSessionStore | None = None,
    ) -> SessionNegotiator:
        return cls(
            properties.secret,
            store,
            cookie_name=properties.cookie_name,
            cookie=properties.cookie,
            save_uninitialized=properties.save_uninitialized,
        )

    @property
    def store(self) -> SessionStore | ContextAwareSessionStore:
        return self._store

    @property
    def key_store(self) -> SecretKeyStore:
        return self._key_store

    @property
    def signer(self) -> SessionIdSigner:
        return self._signer

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    @property
    def cookie(self) -> CookieProperties:
        return self._cookie

    def in_scope(self, path: str) -> bool:
        """Whether *path* falls under the cookie's path."""
        return path.startswith(self._cookie.path or "/")

    def new_session(self) -> Session:
        return Session(SessionCookie(self._cookie))

    # ------------------------------------------------------------------
    # Resolve phase
    # ------------------------------------------------------------------

    async def resolve(self, request: Any) -> Session | None:
        """Determine the request's session and attach it to ``request.state.session``.

        Returns ``None`` (and attaches ``None``) for paths outside the
        cookie path.

        Raises:
            Exception: Whatever the store raised, other than
                :class:`SessionNotFoundException`.
        """
        if not self.in_scope(request.url.path):
            request.state.session = None
            return None

        session = await self._resolve_session(request)
        request.state.session = session
        return session

    async def _resolve_session(self, request: Any) -> Session:
        signed_id = request.cookies.get(self._cookie_name)
        if not signed_id:
            return self.new_session()

        session_id = self._signer.unsign(signed_id)
        if session_id is None:
            _logger.debug("Session cookie signature rejected, issuing a new session")
            return self.new_session()

        try:
            payload = await self._dispatcher.get(session_id, request)
        except SessionNotFoundException:
            payload = None
        if payload is None:
            _logger.debug("Session not found in store, issuing a new session")
            return self.new_session()

        if isinstance(payload, Session):
            payload = payload.to_dict()
        session = Session.from_dict({**payload, "session_id": session_id}, self._cookie)
        if session.is_expired():
            _logger.debug("Session expired at %s, renewing", session.expires)
            await self._destroy_in_store(session_id, request)
            return self.new_session()

        return session

    # ------------------------------------------------------------------
    # Persist phase
    # ------------------------------------------------------------------

    def should_save(self, request: Any, session: Session) -> bool:
        """Decide whether *session* is stored and its cookie sent.

        Pristine sessions are skipped unless ``save_uninitialized`` is set.
        A ``secure`` cookie is only issued over an encrypted connection or
        when a reverse proxy declares ``X-Forwarded-Proto: https``.
        """
        if not self._save_uninitialized and session.is_pristine:
            return False
        if self._cookie.secure is not True:
            return True
        if request.url.scheme == "https":
            return True
        return request.headers.get(_FORWARDED_PROTO_HEADER) == "https"

    async def persist(self, request: Any, response: Any) -> None:
        """Store the attached session and set the signed cookie on *response*.

        Raises:
            Exception: Whatever the store raised; the cookie is not set.
        """
        session: Session | None = getattr(request.state, "session", None)
        if session is None or not session.session_id:
            return
        if not self.should_save(request, session):
            _logger.debug("Session %s not saved", "new" if session.is_new else "existing")
            return

        await self._dispatcher.set(session.session_id, session, request)
        session.signed_id = self._signer.sign(session.session_id)
        response.set_cookie(self._cookie_name, session.signed_id, **session.cookie.options())

    # ------------------------------------------------------------------
    # Destroy
    # ------------------------------------------------------------------

    async def destroy(self, request: Any) -> None:
        """Delete the attached session from the store and detach it from the request.

        On a store failure the error propagates and the session stays attached.
        """
        session: Session | None = getattr(request.state, "session", None)
        if session is None:
            return
        await self._destroy_in_store(session.session_id, request)
        request.state.session = None

    async def _destroy_in_store(self, session_id: str, request: Any) -> None:
        try:
            await self._dispatcher.destroy(session_id, request)
        except SessionNotFoundException:
            _logger.debug("Session already absent from store")
