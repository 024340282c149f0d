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
"""Tests for building the negotiator and filter from Config."""

from __future__ import annotations

import json
import logging

import pytest

from flysession.core.config import Config
from flysession.kernel.exceptions import ConfigurationException, InvalidSecretException
from flysession.session.adapters.memory import InMemorySessionStore
from flysession.logging import LoggingPort, StructlogAdapter
from flysession.session.configuration import (
    configure_logging,
    session_filter_from_config,
    session_negotiator_from_config,
)
from flysession.session.filter import SessionFilter

SECRET = "c" * 32


def _config(**session) -> Config:
    return Config({"flysession": {"session": session}})


class TestSessionNegotiatorFromConfig:
    def test_minimal_config_uses_defaults(self):
        negotiator = session_negotiator_from_config(_config(secret=SECRET))
        assert negotiator.cookie_name == "sessionId"
        assert negotiator.cookie.path == "/"
        assert negotiator.cookie.secure is True
        assert isinstance(negotiator.store, InMemorySessionStore)
        assert negotiator.key_store.signing_secret == SECRET

    def test_rotation_list_and_cookie_section(self):
        config = _config(
            secret=[SECRET, "legacy-secret"],
            **{"cookie-name": "sid", "cookie": {"path": "/app", "max-age": 600, "same-site": "lax"}},
        )
        negotiator = session_negotiator_from_config(config)
        assert list(negotiator.key_store) == [SECRET, "legacy-secret"]
        assert negotiator.cookie_name == "sid"
        assert negotiator.cookie.path == "/app"
        assert negotiator.cookie.max_age == 600
        assert negotiator.cookie.same_site == "lax"

    def test_given_store_is_used(self):
        store = InMemorySessionStore()
        negotiator = session_negotiator_from_config(_config(secret=SECRET), store)
        assert negotiator.store is store

    def test_secret_from_placeholder(self, monkeypatch):
        monkeypatch.setenv("APP_SESSION_SECRET", SECRET)
        negotiator = session_negotiator_from_config(_config(secret="${APP_SESSION_SECRET}"))
        assert negotiator.key_store.signing_secret == SECRET

    def test_missing_secret_raises(self):
        with pytest.raises(ConfigurationException, match="secret option is required"):
            session_negotiator_from_config(Config({}))

    def test_short_secret_raises(self):
        with pytest.raises(InvalidSecretException):
            session_negotiator_from_config(_config(secret="short"))

    def test_invalid_section_raises_value_error(self):
        with pytest.raises(ValueError):
            session_negotiator_from_config(_config(secret=SECRET, cookie={"max-age": -5}))


class TestSessionFilterFromConfig:
    def test_builds_filter_around_negotiator(self):
        store = InMemorySessionStore()
        session_filter = session_filter_from_config(_config(secret=SECRET), store)
        assert isinstance(session_filter, SessionFilter)
        assert session_filter.negotiator.store is store


class _FakeLogging:
    def __init__(self) -> None:
        self.configured_with: Config | None = None

    def configure(self, config: Config) -> None:
        self.configured_with = config

    def get_logger(self, name: str):
        return logging.getLogger(name)

    def set_level(self, name: str, level: str) -> None:
        pass


class TestConfigureLogging:
    def test_defaults_to_structlog(self):
        adapter = configure_logging(Config({}))
        assert isinstance(adapter, StructlogAdapter)
        assert isinstance(adapter, LoggingPort)
        assert len(logging.getLogger().handlers) == 1

    def test_given_adapter_is_configured(self):
        fake = _FakeLogging()
        config = Config({})
        assert configure_logging(config, fake) is fake
        assert fake.configured_with is config

    def test_session_records_rendered_as_json(self, capsys):
        config = Config(
            {"flysession": {"logging": {"format": "json", "level": {"root": "INFO", "flysession.session": "DEBUG"}}}}
        )
        configure_logging(config)

        logging.getLogger("flysession.session.negotiator").debug("Session not found in store")

        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
        record = json.loads(lines[-1])
        assert record["event"] == "Session not found in store"
        assert record["level"] == "debug"
        assert record["logger"] == "flysession.session.negotiator"

    def test_negotiator_startup_logged_at_info(self, capsys):
        configure_logging(Config({"flysession": {"logging": {"format": "json"}}}))

        session_negotiator_from_config(_config(secret=SECRET))

        out = capsys.readouterr().out
        assert "Session negotiation configured: cookie=sessionId" in out
