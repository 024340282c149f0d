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
"""Session subsystem configuration properties."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from flysession.core.config import config_properties


class CookieProperties(BaseModel):
    """Attributes of the session cookie (flysession.session.cookie.*).

    ``path`` also scopes session handling: requests outside it get no session.
    ``max_age`` is in seconds; ``None`` issues a browser-session cookie that
    never expires server-side.
    """

    path: str = "/"
    domain: str | None = None
    secure: bool = True
    http_only: bool = True
    same_site: Literal["lax", "strict", "none"] | None = None
    max_age: int | None = Field(default=None, ge=0)


@config_properties(prefix="flysession.session")
class SessionProperties(BaseModel):
    """Configuration for session negotiation (flysession.session.*)."""

    secret: str | list[str] | None = None
    cookie_name: str = "sessionId"
    save_uninitialized: bool = True
    cookie: CookieProperties = Field(default_factory=CookieProperties)
