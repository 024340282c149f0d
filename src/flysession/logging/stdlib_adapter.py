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
"""StdlibLoggingAdapter — LoggingPort using only stdlib logging."""

from __future__ import annotations

import logging
import sys
from typing import Any

from flysession.config.properties.logging import LoggingProperties
from flysession.core.config import Config

_FORMATS = {
    "json": '{"timestamp":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
    "console": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
}


class _StructuredLogger:
    """Wraps a stdlib Logger to accept structlog-style calls: ``logger.info(event, **kwargs)``."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, event: str, kwargs: dict[str, Any]) -> None:
        if kwargs:
            event = f"{event} | " + " ".join(f"{k}={v}" for k, v in kwargs.items())
        self._logger.log(level, event)

    def debug(self, event: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, event, kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._log(logging.INFO, event, kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, event, kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, event, kwargs)


class StdlibLoggingAdapter:
    """LoggingPort for deployments that keep structlog out of the log pipeline.

    Produces ``event | key=value`` lines through the standard library.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"

    def configure(self, config: Config) -> None:
        props = config.bind(LoggingProperties)
        levels = {k: str(v).upper() for k, v in props.level.items()}
        self._root_level = levels.pop("root", "INFO")
        self._format = props.format.lower()

        logging.basicConfig(
            format=_FORMATS.get(self._format, _FORMATS["console"]),
            stream=sys.stdout,
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )
        for module, level in levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        return _StructuredLogger(logging.getLogger(name))

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))
