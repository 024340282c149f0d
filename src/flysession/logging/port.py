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
"""LoggingPort — decides how flysession's log records are rendered.

Library modules never talk to the port: they emit through
``logging.getLogger(__name__)`` under the ``flysession.*`` namespace. An
adapter installed with
:func:`~flysession.session.configuration.configure_logging` picks the output
format and the per-logger levels from ``flysession.logging.*``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from flysession.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Installs a log pipeline and hands out loggers that write to it."""

    def configure(self, config: Config) -> None:
        """Bind ``flysession.logging.*`` and install the root handler."""
        ...

    def get_logger(self, name: str) -> Any:
        """Logger accepting ``logger.info(event, **fields)`` calls."""
        ...

    def set_level(self, name: str, level: str) -> None:
        """Set the level of one logger, e.g. ``("flysession.session", "DEBUG")``."""
        ...
