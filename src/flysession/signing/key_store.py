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
"""SecretKeyStore — ordered signing/unsigning secrets for cookie rotation.

Position 0 always holds the *signing* secret, which signs new session
identifiers. Every later position holds an *unsigning* secret that is still
accepted when verifying, so a secret can be rotated out without logging out
every client at once::

    keys = SecretKeyStore("a" * 32)
    keys.add_signing("b" * 32)   # "b..." signs, "a..." still verifies
    keys.remove("a" * 32)        # cookies signed with "a..." now fail
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from flysession.kernel.exceptions import InvalidSecretException, SigningSecretRemovalException

MIN_SECRET_LENGTH = 32


class SecretKeyStore:
    """Ordered collection of secrets with exactly one signing secret.

    Args:
        secrets: A single signing secret, or a non-empty sequence whose first
            item is the signing secret and whose remaining items are unsigning
            secrets, kept in the given order. ``[a, b, c]`` verifies against
            ``a``, then ``b``, then ``c``; calling :meth:`add_unsigning` for
            each of ``b`` and ``c`` instead would yield ``[a, c, b]``, since
            every call inserts at position 1.

    Raises:
        InvalidSecretException: If no secret is given or the signing secret
            does not satisfy :data:`MIN_SECRET_LENGTH`.
    """

    def __init__(self, secrets: str | Sequence[str]) -> None:
        self._secrets: list[str] = []
        if isinstance(secrets, str):
            self.add_signing(secrets)
            return

        if not secrets:
            raise InvalidSecretException(
                "The initial list of secrets must have at least 1 secret",
                code="SESSION_SECRET_EMPTY",
            )
        self.add_signing(secrets[0])
        # add_unsigning inserts at position 1, so feed it back to front.
        for secret in reversed(secrets[1:]):
            self.add_unsigning(secret)

    @property
    def signing_secret(self) -> str:
        return self._secrets[0]

    @property
    def unsigning_secrets(self) -> list[str]:
        return self._secrets[1:]

    def add_signing(self, secret: str) -> None:
        """Make *secret* the signing secret; the previous one becomes the first unsigning secret.

        Raises:
            InvalidSecretException: If *secret* is not a string of at least
                :data:`MIN_SECRET_LENGTH` characters.
        """
        if not isinstance(secret, str) or len(secret) < MIN_SECRET_LENGTH:
            raise InvalidSecretException(
                f"The secret must be a string with length {MIN_SECRET_LENGTH} or greater",
                code="SESSION_SECRET_TOO_SHORT",
            )
        self._secrets.insert(0, secret)

    def add_unsigning(self, secret: str) -> None:
        """Accept *secret* for verification only, tried right after the signing secret.

        No length policy applies, so legacy secrets can be phased out.
        """
        self._secrets.insert(1, secret)

    def contains(self, secret: str) -> bool:
        return secret in self._secrets

    def is_signing(self, secret: str) -> bool:
        return self._secrets[0] == secret

    def remove(self, secret: str) -> None:
        """Remove the last occurrence of *secret*; unknown secrets are ignored.

        Raises:
            SigningSecretRemovalException: If *secret* is the signing secret.
        """
        positions = [i for i, s in enumerate(self._secrets) if s == secret]
        if not positions:
            return
        index = positions[-1]
        if index == 0:
            raise SigningSecretRemovalException(
                "Unable to remove the signing secret. Add another signing secret first",
                code="SESSION_SECRET_SIGNING_REMOVAL",
            )
        del self._secrets[index]

    def __contains__(self, secret: object) -> bool:
        return secret in self._secrets

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._secrets))

    def __len__(self) -> int:
        return len(self._secrets)

    def __repr__(self) -> str:
        return f"SecretKeyStore(secrets={len(self._secrets)})"
