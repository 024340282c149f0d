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
"""WebFilter protocol — the seam between the session negotiator and the ASGI app.

A filter sees the request before the handler runs and the finished response
after it returns. :class:`~flysession.session.filter.SessionFilter` needs both
halves: it resolves the session on the way in and writes ``Set-Cookie`` on
the way out.
"""

from __future__ import annotations

from collections.abc import Callable, Coroutine
from typing import Any, Protocol, runtime_checkable

# Awaitable returning the downstream response, already buffered and mutable.
CallNext = Callable[..., Coroutine[Any, Any, Any]]


@runtime_checkable
class WebFilter(Protocol):
    """Request/response interceptor run by the filter chain middleware.

    ``request`` carries ``url``, ``cookies``, ``headers`` and a writable
    ``state``; the response returned by ``call_next`` accepts header and
    cookie changes until the filter returns it.
    """

    async def do_filter(self, request: Any, call_next: CallNext) -> Any: ...

    def should_not_filter(self, request: Any) -> bool:
        """``True`` lets the request bypass ``do_filter`` entirely."""
        ...
