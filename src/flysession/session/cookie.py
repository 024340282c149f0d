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
"""SessionCookie — per-session cookie attributes and expiry."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from flysession.config.properties.session import CookieProperties


class SessionCookie:
    """Cookie attributes for one session.

    A fresh cookie with ``max_age`` set expires ``max_age`` seconds from now;
    a restored cookie keeps the expiry it was persisted with.
    """

    def __init__(self, properties: CookieProperties, expires: datetime | None = None) -> None:
        self.properties = properties
        if expires is None and properties.max_age is not None:
            expires = datetime.now(UTC) + timedelta(seconds=properties.max_age)
        self.expires = expires

    @property
    def secure(self) -> bool:
        return self.properties.secure

    def options(self) -> dict[str, Any]:
        """Keyword arguments for ``Response.set_cookie()``."""
        opts: dict[str, Any] = {
            "path": self.properties.path,
            "domain": self.properties.domain,
            "secure": self.properties.secure,
            "httponly": self.properties.http_only,
            "samesite": self.properties.same_site,
        }
        if self.expires is not None:
            remaining = int((self.expires - datetime.now(UTC)).total_seconds())
            opts["max_age"] = max(remaining, 0)
            opts["expires"] = self.expires
        return opts
