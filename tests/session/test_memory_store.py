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
"""Tests for InMemorySessionStore."""

from __future__ import annotations

import pytest

from flysession.config.properties.session import CookieProperties
from flysession.kernel.exceptions import SessionNotFoundException
from flysession.session.adapters.memory import InMemorySessionStore
from flysession.session.cookie import SessionCookie
from flysession.session.ports.outbound import SessionStore
from flysession.session.session import Session


def _session(**data) -> Session:
    session = Session(SessionCookie(CookieProperties()))
    for key, value in data.items():
        session[key] = value
    return session


class TestInMemorySessionStore:
    def test_satisfies_protocol(self):
        assert isinstance(InMemorySessionStore(), SessionStore)

    @pytest.mark.asyncio
    async def test_set_and_get(self):
        store = InMemorySessionStore()
        session = _session(user=1)
        await store.set(session.session_id, session)

        payload = await store.get(session.session_id)
        assert payload is not None
        assert payload["session_id"] == session.session_id
        assert payload["data"] == {"user": 1}
        assert session.session_id in store
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self):
        assert await InMemorySessionStore().get("missing") is None

    @pytest.mark.asyncio
    async def test_stored_payload_is_isolated(self):
        store = InMemorySessionStore()
        session = _session(cart=[1])
        await store.set(session.session_id, session)

        session["cart"].append(2)
        payload = await store.get(session.session_id)
        payload["data"]["cart"].append(3)

        assert (await store.get(session.session_id))["data"]["cart"] == [1]

    @pytest.mark.asyncio
    async def test_destroy(self):
        store = InMemorySessionStore()
        session = _session()
        await store.set(session.session_id, session)
        await store.destroy(session.session_id)
        assert await store.get(session.session_id) is None

    @pytest.mark.asyncio
    async def test_destroy_missing_raises_not_found(self):
        with pytest.raises(SessionNotFoundException):
            await InMemorySessionStore().destroy("missing")

    @pytest.mark.asyncio
    async def test_clear(self):
        store = InMemorySessionStore()
        for _ in range(3):
            session = _session()
            await store.set(session.session_id, session)
        await store.clear()
        assert len(store) == 0
