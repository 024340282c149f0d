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
"""Session store protocols.

A store persists session payloads keyed by raw session id. It comes in two
shapes: :class:`SessionStore` and :class:`ContextAwareSessionStore`, whose
methods also receive the current request (for tenant routing, per-request
connections, and the like). A store may mix the two shapes per method.

Not-found is not an error: ``get`` returns ``None`` (or raises
:class:`~flysession.kernel.exceptions.SessionNotFoundException`) and
``destroy`` may raise ``SessionNotFoundException``. Any other exception is a
store failure and aborts the request.

``get`` may return either the :meth:`Session.to_dict` snapshot or the
:class:`Session` object handed to ``set``; stores that keep the object
as-is need no serialization step.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flysession.session.session import Session


@runtime_checkable
class SessionStore(Protocol):
    """Session persistence keyed by session id."""

    async def get(self, session_id: str) -> Mapping[str, Any] | Session | None: ...

    async def set(self, session_id: str, session: Session) -> None: ...

    async def destroy(self, session_id: str) -> None: ...


@runtime_checkable
class ContextAwareSessionStore(Protocol):
    """Session persistence that also receives the current request."""

    async def get(self, session_id: str, request: Any) -> Mapping[str, Any] | Session | None: ...

    async def set(self, session_id: str, session: Session, request: Any) -> None: ...

    async def destroy(self, session_id: str, request: Any) -> None: ...
