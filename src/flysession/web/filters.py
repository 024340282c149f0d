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
"""OncePerRequestFilter — path-scoped base for filters in the chain."""

from __future__ import annotations

import abc
from fnmatch import fnmatch
from typing import Any

from flysession.web.ports.filter import CallNext


class OncePerRequestFilter(abc.ABC):
    """Base for :class:`WebFilter` implementations limited by request path.

    Patterns are ``fnmatch`` globs against ``request.url.path``.
    :class:`~flysession.session.filter.SessionFilter` leaves both lists empty
    and lets the negotiator apply the cookie path instead, so requests outside
    it still get ``request.state.session = None``.

    Attributes:
        url_patterns: Paths the filter runs on; empty means every path.
        exclude_patterns: Paths skipped even when ``url_patterns`` match.
    """

    url_patterns: list[str] = []
    exclude_patterns: list[str] = []

    def should_not_filter(self, request: Any) -> bool:
        path: str = request.url.path
        if self.url_patterns and not any(fnmatch(path, p) for p in self.url_patterns):
            return True
        return any(fnmatch(path, p) for p in self.exclude_patterns)

    @abc.abstractmethod
    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        """Run around the downstream call; skipping ``call_next`` short-circuits the handler."""
        ...
