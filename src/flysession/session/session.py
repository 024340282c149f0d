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
"""Session — the per-request view of one server-side session."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import UTC, datetime
from typing import Any

from flysession.config.properties.session import CookieProperties
from flysession.session.cookie import SessionCookie
from flysession.signing.signer import generate_session_id


class Session:
    """Wraps a session's payload with its identifier, expiry, and cookie policy.

    Handlers read and write the payload through the mapping protocol
    (``session["user"] = 1``) or the ``*_attribute`` accessors. Every write
    marks the session as modified.

    Attributes:
        session_id: Raw session identifier. Never sent to the client unsigned.
        signed_id: The identifier signed with the current signing secret;
            ``None`` until the session is persisted.
        cookie: Cookie attributes and expiry for this session.
        is_new: ``True`` if the session was created during the current request.
    """

    def __init__(
        self,
        cookie: SessionCookie,
        session_id: str | None = None,
        data: dict[str, Any] | None = None,
        *,
        is_new: bool = True,
    ) -> None:
        self.session_id = session_id if session_id is not None else generate_session_id()
        self.signed_id: str | None = None
        self.cookie = cookie
        self.is_new = is_new
        self._data: dict[str, Any] = dict(data) if data else {}
        self._modified = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], cookie_properties: CookieProperties) -> Session:
        """Rebuild a session from a store payload produced by :meth:`to_dict`."""
        expires = payload.get("expires")
        if isinstance(expires, str):
            expires = datetime.fromisoformat(expires)
        if isinstance(expires, datetime) and expires.tzinfo is None:
            expires = expires.replace(tzinfo=UTC)
        cookie = SessionCookie(cookie_properties, expires=expires)
        # Restored sessions keep their stored expiry, even when it is None.
        cookie.expires = expires
        return cls(
            cookie,
            session_id=payload["session_id"],
            data=payload.get("data"),
            is_new=False,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serializable snapshot for session stores."""
        return {
            "session_id": self.session_id,
            "expires": self.expires.isoformat() if self.expires is not None else None,
            "data": dict(self._data),
        }

    @property
    def expires(self) -> datetime | None:
        return self.cookie.expires

    @property
    def modified(self) -> bool:
        return self._modified

    @property
    def is_pristine(self) -> bool:
        """``True`` while nothing was ever written and the payload is empty."""
        return not self._modified and not self._data

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires is None:
            return False
        return (now or datetime.now(UTC)) >= self.expires

    def get_attribute(self, name: str) -> Any | None:
        """Return the session attribute value, or ``None`` if absent."""
        return self._data.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        self._data[name] = value
        self._modified = True

    def remove_attribute(self, name: str) -> None:
        """Remove a session attribute if it exists."""
        if name in self._data:
            del self._data[name]
            self._modified = True

    def get_attribute_names(self) -> list[str]:
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()
        self._modified = True

    def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_attribute(name, value)

    def __delitem__(self, name: str) -> None:
        del self._data[name]
        self._modified = True

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Session(session_id={self.session_id!r}, is_new={self.is_new}, modified={self._modified})"
