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
"""Tests for session id signing and multi-secret verification."""

from __future__ import annotations

import pytest

from flysession.signing.key_store import SecretKeyStore
from flysession.signing.signer import SessionIdSigner, generate_session_id, sign, unsign

SECRET_A = "a" * 32
SECRET_B = "b" * 32


class TestSignUnsign:
    def test_round_trip_recovers_raw_id(self):
        raw_id = generate_session_id()
        assert unsign(sign(raw_id, SECRET_A), SECRET_A) == raw_id

    def test_signed_value_format(self):
        signed = sign("abc", SECRET_A)
        raw, _, signature = signed.rpartition(".")
        assert raw == "abc"
        assert signature
        assert "=" not in signature

    def test_sign_is_deterministic(self):
        assert sign("abc", SECRET_A) == sign("abc", SECRET_A)

    def test_wrong_secret_is_invalid(self):
        assert unsign(sign("abc", SECRET_A), SECRET_B) is None

    def test_tampered_id_is_invalid(self):
        signature = sign("abc", SECRET_A).rpartition(".")[2]
        assert unsign(f"abd.{signature}", SECRET_A) is None

    @pytest.mark.parametrize("value", ["", "no-separator", "abc.", ".", "abc.!!!", "ümlaut.sig"])
    def test_garbage_is_invalid(self, value):
        assert unsign(value, SECRET_A) is None


class TestSessionIdSigner:
    def test_signs_with_signing_secret(self):
        signer = SessionIdSigner(SecretKeyStore([SECRET_A, SECRET_B]))
        assert signer.sign("abc") == sign("abc", SECRET_A)

    def test_verifies_against_unsigning_secrets(self):
        signer = SessionIdSigner(SecretKeyStore([SECRET_A, SECRET_B]))
        assert signer.unsign(sign("abc", SECRET_B)) == "abc"

    def test_unknown_secret_is_invalid(self):
        signer = SessionIdSigner(SecretKeyStore(SECRET_A))
        assert signer.unsign(sign("abc", "z" * 32)) is None

    def test_rotation_keeps_old_cookies_valid_until_removed(self):
        keys = SecretKeyStore(SECRET_A)
        signer = SessionIdSigner(keys)
        old_cookie = signer.sign("old")

        keys.add_signing(SECRET_B)
        new_cookie = signer.sign("new")

        assert unsign(new_cookie, SECRET_B) == "new"
        assert signer.unsign(old_cookie) == "old"

        keys.remove(SECRET_A)
        assert signer.unsign(old_cookie) is None
        assert signer.unsign(new_cookie) == "new"


class TestGenerateSessionId:
    def test_ids_are_unique_and_url_safe(self):
        ids = {generate_session_id() for _ in range(100)}
        assert len(ids) == 100
        for session_id in ids:
            assert len(session_id) == 32
            assert "." not in session_id
