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
"""SessionFilter — exposes the negotiated session to request handlers."""

from __future__ import annotations

import functools
from typing import Any

from flysession.session.negotiator import SessionNegotiator
from flysession.web.filters import OncePerRequestFilter
from flysession.web.ports.filter import CallNext


class SessionFilter(OncePerRequestFilter):
    """Runs a :class:`SessionNegotiator` around every request.

    Handlers see:

    * ``request.state.session`` — the :class:`~flysession.session.session.Session`,
      or ``None`` outside the cookie path or after destruction
    * ``request.state.session_store`` — the configured store
    * ``request.state.destroy_session`` — ``await`` it to delete the session

    Whatever session is attached when the handler returns is persisted
    before the response is sent.
    """

    def __init__(self, negotiator: SessionNegotiator) -> None:
        self._negotiator = negotiator

    @property
    def negotiator(self) -> SessionNegotiator:
        return self._negotiator

    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        await self._negotiator.resolve(request)
        request.state.session_store = self._negotiator.store
        request.state.destroy_session = functools.partial(self._negotiator.destroy, request)

        response = await call_next(request)

        await self._negotiator.persist(request, response)
        return response
