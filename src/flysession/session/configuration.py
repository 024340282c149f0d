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
"""Builds the session negotiator and filter from configuration and installs logging."""

from __future__ import annotations

import logging

from flysession.config.properties.session import SessionProperties
from flysession.core.config import Config
from flysession.logging.port import LoggingPort
from flysession.logging.structlog_adapter import StructlogAdapter
from flysession.session.filter import SessionFilter
from flysession.session.negotiator import SessionNegotiator
from flysession.session.ports.outbound import ContextAwareSessionStore, SessionStore

_logger = logging.getLogger(__name__)


def session_negotiator_from_config(
    config: Config,
    store: SessionStore | ContextAwareSessionStore | None = None,
) -> SessionNegotiator:
    """Create a negotiator from ``flysession.session.*``.

    Raises:
        ValueError: If the section fails validation.
        ConfigurationException: If the secret is missing or too short.
    """
    properties = config.bind(SessionProperties)
    negotiator = SessionNegotiator.from_properties(properties, store)
    _logger.info(
        "Session negotiation configured: cookie=%s store=%s secrets=%d",
        negotiator.cookie_name,
        type(negotiator.store).__name__,
        len(negotiator.key_store),
    )
    return negotiator


def session_filter_from_config(
    config: Config,
    store: SessionStore | ContextAwareSessionStore | None = None,
) -> SessionFilter:
    return SessionFilter(session_negotiator_from_config(config, store))


def configure_logging(config: Config, adapter: LoggingPort | None = None) -> LoggingPort:
    """Install *adapter* (a :class:`StructlogAdapter` by default) for ``flysession.logging.*``.

    Call once at startup, before the first request, so the negotiator's
    ``flysession.session.*`` records use the configured format and levels.
    """
    adapter = adapter if adapter is not None else StructlogAdapter()
    adapter.configure(config)
    return adapter
