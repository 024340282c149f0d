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
"""Tests for StoreDispatcher — per-method store shape resolution."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from flysession.config.properties.session import CookieProperties
from flysession.kernel.exceptions import ConfigurationException
from flysession.session.cookie import SessionCookie
from flysession.session.dispatch import StoreDispatcher
from flysession.session.ports.outbound import ContextAwareSessionStore, SessionStore
from flysession.session.session import Session


class _PlainStore:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    async def get(self, session_id):
        self.calls.append(("get", session_id))
        return None

    async def set(self, session_id, session):
        self.calls.append(("set", session_id))

    async def destroy(self, session_id):
        self.calls.append(("destroy", session_id))


class _ContextStore:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    async def get(self, session_id, request):
        self.calls.append(("get", session_id, request))
        return None

    async def set(self, session_id, session, request):
        self.calls.append(("set", session_id, request))

    async def destroy(self, session_id, request):
        self.calls.append(("destroy", session_id, request))


class _MixedStore(_PlainStore):
    async def get(self, session_id, request):
        self.calls.append(("get", session_id, request))
        return None


class _TtlStore(_PlainStore):
    """Plain store whose extra parameters all have defaults."""

    async def get(self, session_id, consistent=False):
        self.calls.append(("get", session_id, consistent))
        return None

    async def set(self, session_id, session, ttl=3600):
        self.calls.append(("set", session_id, ttl))


def _session() -> Session:
    return Session(SessionCookie(CookieProperties()), session_id="sid")


class TestResolution:
    def test_plain_store(self):
        dispatcher = StoreDispatcher(_PlainStore())
        assert dispatcher.context_aware == {"get": False, "set": False, "destroy": False}

    def test_context_aware_store(self):
        dispatcher = StoreDispatcher(_ContextStore())
        assert dispatcher.context_aware == {"get": True, "set": True, "destroy": True}

    def test_mixed_store_resolved_per_method(self):
        dispatcher = StoreDispatcher(_MixedStore())
        assert dispatcher.context_aware == {"get": True, "set": False, "destroy": False}

    def test_defaulted_parameters_do_not_make_store_context_aware(self):
        dispatcher = StoreDispatcher(_TtlStore())
        assert dispatcher.context_aware == {"get": False, "set": False, "destroy": False}

    def test_optional_request_parameter_stays_plain(self):
        class _OptionalRequest(_PlainStore):
            async def destroy(self, session_id, request=None):
                self.calls.append(("destroy", session_id, request))

        assert StoreDispatcher(_OptionalRequest()).context_aware["destroy"] is False

    def test_missing_method_is_configuration_error(self):
        class _NoDestroy:
            async def get(self, session_id):
                return None

            async def set(self, session_id, session):
                pass

        with pytest.raises(ConfigurationException, match="destroy"):
            StoreDispatcher(_NoDestroy())

    def test_protocols_match_both_shapes(self):
        assert isinstance(_PlainStore(), SessionStore)
        assert isinstance(_ContextStore(), ContextAwareSessionStore)


class TestDispatch:
    @pytest.mark.asyncio
    async def test_plain_store_never_receives_request(self):
        store = _PlainStore()
        dispatcher = StoreDispatcher(store)
        request = SimpleNamespace()

        await dispatcher.get("sid", request)
        await dispatcher.set("sid", _session(), request)
        await dispatcher.destroy("sid", request)

        assert store.calls == [("get", "sid"), ("set", "sid"), ("destroy", "sid")]

    @pytest.mark.asyncio
    async def test_context_store_receives_request(self):
        store = _ContextStore()
        dispatcher = StoreDispatcher(store)
        request = SimpleNamespace()

        await dispatcher.get("sid", request)
        await dispatcher.set("sid", _session(), request)
        await dispatcher.destroy("sid", request)

        assert store.calls == [
            ("get", "sid", request),
            ("set", "sid", request),
            ("destroy", "sid", request),
        ]

    @pytest.mark.asyncio
    async def test_defaulted_parameters_keep_their_defaults(self):
        store = _TtlStore()
        dispatcher = StoreDispatcher(store)
        request = SimpleNamespace()

        await dispatcher.get("sid", request)
        await dispatcher.set("sid", _session(), request)

        assert store.calls == [("get", "sid", False), ("set", "sid", 3600)]
