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
"""StoreDispatcher — calls each store method in the shape the store implements."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from flysession.kernel.exceptions import ConfigurationException
from flysession.session.ports.outbound import ContextAwareSessionStore, SessionStore
from flysession.session.session import Session

_logger = logging.getLogger(__name__)

# Required positional parameters (after self) of the request-aware form of each method.
# Parameters with defaults do not count, so `set(self, sid, session, ttl=3600)` stays plain.
_CONTEXT_AWARE_ARITY = {"get": 2, "set": 3, "destroy": 2}


def _positional_arity(method: Callable[..., Any]) -> int:
    params = inspect.signature(method).parameters.values()
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return 1 << 16
    return sum(
        1
        for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and p.default is inspect.Parameter.empty
    )


class StoreDispatcher:
    """Uniform request-aware facade over a :class:`SessionStore` or :class:`ContextAwareSessionStore`.

    Which form each of ``get``, ``set`` and ``destroy`` takes is decided once,
    here, from the store's declared signatures. Every later call goes straight
    to the matching form.

    Raises:
        ConfigurationException: If the store lacks one of the three methods.
    """

    def __init__(self, store: SessionStore | ContextAwareSessionStore) -> None:
        self._store = store
        self._context_aware: dict[str, bool] = {}
        for name, arity in _CONTEXT_AWARE_ARITY.items():
            method = getattr(store, name, None)
            if not callable(method):
                raise ConfigurationException(
                    f"Session store {type(store).__name__} does not implement '{name}'",
                    code="SESSION_STORE_INVALID",
                    context={"store": type(store).__name__, "method": name},
                )
            self._context_aware[name] = _positional_arity(method) >= arity
        _logger.debug(
            "Session store %s dispatch resolved: %s", type(store).__name__, self._context_aware
        )

    @property
    def store(self) -> SessionStore | ContextAwareSessionStore:
        return self._store

    @property
    def context_aware(self) -> Mapping[str, bool]:
        return dict(self._context_aware)

    async def get(self, session_id: str, request: Any) -> Mapping[str, Any] | Session | None:
        if self._context_aware["get"]:
            return await self._store.get(session_id, request)  # type: ignore[call-arg]
        return await self._store.get(session_id)  # type: ignore[call-arg]

    async def set(self, session_id: str, session: Session, request: Any) -> None:
        if self._context_aware["set"]:
            await self._store.set(session_id, session, request)  # type: ignore[call-arg]
        else:
            await self._store.set(session_id, session)  # type: ignore[call-arg]

    async def destroy(self, session_id: str, request: Any) -> None:
        if self._context_aware["destroy"]:
            await self._store.destroy(session_id, request)  # type: ignore[call-arg]
        else:
            await self._store.destroy(session_id)  # type: ignore[call-arg]
