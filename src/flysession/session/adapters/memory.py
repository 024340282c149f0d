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
"""In-memory session store."""

from __future__ import annotations

import asyncio
import copy
from collections.abc import Mapping
from typing import Any

from flysession.kernel.exceptions import SessionNotFoundException
from flysession.session.session import Session


class InMemorySessionStore:
    """Dict-backed session store guarded by an ``asyncio.Lock``.

    Stores deep-copied ``Session.to_dict()`` snapshots so later mutations of
    a request's session never leak into the store without an explicit ``set``.
    Expiry is left to the negotiator. Suitable for development, testing, and
    single-process applications.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, dict[str, Any]] = {}
        self._lock = asyncio.Lock()

    async def get(self, session_id: str) -> Mapping[str, Any] | None:
        """Return a copy of the stored payload, or ``None`` if unknown."""
        async with self._lock:
            payload = self._sessions.get(session_id)
            return copy.deepcopy(payload) if payload is not None else None

    async def set(self, session_id: str, session: Session) -> None:
        async with self._lock:
            self._sessions[session_id] = copy.deepcopy(session.to_dict())

    async def destroy(self, session_id: str) -> None:
        """Remove a session.

        Raises:
            SessionNotFoundException: If no session is stored under *session_id*.
        """
        async with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundException(session_id)

    async def clear(self) -> None:
        async with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions
