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
"""flysession Session — signed-cookie session negotiation with pluggable stores.

Import concrete store types from the adapter package::

    from flysession.session.adapters.memory import InMemorySessionStore
"""

from flysession.session.cookie import SessionCookie
from flysession.session.dispatch import StoreDispatcher
from flysession.session.filter import SessionFilter
from flysession.session.negotiator import SessionNegotiator
from flysession.session.ports.outbound import ContextAwareSessionStore, SessionStore
from flysession.session.session import Session

__all__ = [
    "ContextAwareSessionStore",
    "Session",
    "SessionCookie",
    "SessionFilter",
    "SessionNegotiator",
    "SessionStore",
    "StoreDispatcher",
]
