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
"""Session identifier signing on top of ``itsdangerous``.

A signed identifier is ``<raw id>.<signature>``, the signature being the
unpadded base64url HMAC-SHA256 of the raw id keyed directly by the secret.
"""

from __future__ import annotations

import hashlib
import secrets

from itsdangerous import BadSignature, Signer

from flysession.signing.key_store import SecretKeyStore

_SESSION_ID_BYTES = 24


def generate_session_id() -> str:
    """Return a fresh random session id (32 URL-safe characters)."""
    return secrets.token_urlsafe(_SESSION_ID_BYTES)


def _signer(secret: str) -> Signer:
    return Signer(secret, sep=".", key_derivation="none", digest_method=hashlib.sha256)


def sign(raw_id: str, secret: str) -> str:
    """Sign *raw_id* with *secret*."""
    return _signer(secret).sign(raw_id).decode("utf-8")


def unsign(signed_value: str, secret: str) -> str | None:
    """Return the raw id if *signed_value* was signed with *secret*, else ``None``."""
    try:
        return _signer(secret).unsign(signed_value).decode("utf-8")
    except (BadSignature, UnicodeError):
        return None


class SessionIdSigner:
    """Signs with the key store's signing secret and verifies against all of its secrets."""

    def __init__(self, key_store: SecretKeyStore) -> None:
        self._key_store = key_store

    @property
    def key_store(self) -> SecretKeyStore:
        return self._key_store

    def sign(self, raw_id: str) -> str:
        return sign(raw_id, self._key_store.signing_secret)

    def unsign(self, signed_value: str) -> str | None:
        """Verify *signed_value* against the signing secret, then each unsigning secret.

        Returns the raw id from the first secret that matches, or ``None``
        when no configured secret produced the signature.
        """
        for secret in self._key_store:
            raw_id = unsign(signed_value, secret)
            if raw_id is not None:
                return raw_id
        return None
