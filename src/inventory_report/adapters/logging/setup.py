"""Start lib_log_rich from the ``[lib_log_rich]`` config section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from inventory_report import __init__conf__


class LogSettings(BaseModel):
    """The ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are typed here; every other key is
    a ``RuntimeConfig`` argument and passes through as given.

    Example:
        >>> settings = LogSettings.from_config(Config({"lib_log_rich": {"console_level": "DEBUG"}}, {}))
        >>> settings.environment, settings.passthrough()
        ('prod', {'console_level': 'DEBUG'})
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    service: str | None = None
    environment: str = "prod"

    @classmethod
    def from_config(cls, config: Config) -> LogSettings:
        section: Mapping[str, Any] = config.get("lib_log_rich", default=None) or {}
        return cls.model_validate(dict(section))

    def passthrough(self) -> dict[str, Any]:
        """Keys lib_log_rich understands that this model does not type."""
        return self.model_dump(exclude={"service", "environment"}, exclude_none=True)

    def runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        """``RuntimeConfig`` for these settings; the service defaults to the package name."""
        return lib_log_rich.runtime.RuntimeConfig(
            service=self.service or __init__conf__.name,
            environment=self.environment,
            **self.passthrough(),
        )


def init_logging(config: Config) -> None:
    """Start the runtime once per process and route stdlib logging into it.

    ``.env`` files are read first so ``LOG_*`` variables apply. Later calls
    return without touching the running runtime.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(LogSettings.from_config(config).runtime_config())
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LogSettings",
    "init_logging",
]
