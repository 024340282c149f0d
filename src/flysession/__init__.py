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
"""flysession — signed-cookie HTTP session management for ASGI applications.

Quick start::

    from starlette.applications import Starlette
    from starlette.middleware import Middleware

    from flysession import SessionFilter, SessionNegotiator, WebFilterChainMiddleware

    negotiator = SessionNegotiator(secret="a secret with at least 32 characters")
    app = Starlette(
        routes=[...],
        middleware=[Middleware(WebFilterChainMiddleware, filters=[SessionFilter(negotiator)])],
    )
"""

from flysession.core.config import Config
from flysession.kernel.exceptions import (
    ConfigurationException,
    FlySessionException,
    InvalidSecretException,
    SessionNotFoundException,
    SessionStoreException,
    SigningSecretRemovalException,
)
from flysession.session import (
    ContextAwareSessionStore,
    Session,
    SessionFilter,
    SessionNegotiator,
    SessionStore,
)
from flysession.session.adapters.memory import InMemorySessionStore
from flysession.session.configuration import (
    configure_logging,
    session_filter_from_config,
    session_negotiator_from_config,
)
from flysession.signing import SecretKeyStore, SessionIdSigner
from flysession.web import WebFilterChainMiddleware

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigurationException",
    "ContextAwareSessionStore",
    "FlySessionException",
    "InMemorySessionStore",
    "InvalidSecretException",
    "SecretKeyStore",
    "Session",
    "SessionFilter",
    "SessionIdSigner",
    "SessionNegotiator",
    "SessionNotFoundException",
    "SessionStore",
    "SessionStoreException",
    "SigningSecretRemovalException",
    "WebFilterChainMiddleware",
    "__version__",
    "configure_logging",
    "session_filter_from_config",
    "session_negotiator_from_config",
]
