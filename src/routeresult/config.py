"""Configuration: frozen Config, fixed once per deployment."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from typing import Literal, cast

from dotenv import load_dotenv

from routeresult.errors import ConfigurationError

ForbiddenStatus = Literal[401, 403]

_ENV_PREFIX = "ROUTERESULT_"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Config:
    """Immutable translation settings.

    Example:
        config = Config(forbidden_status=401)
        response = translate(Forbidden(), config=config)
    """

    #: Status sent for ``Forbidden``. Pick one per deployment.
    forbidden_status: ForbiddenStatus = 403
    #: Content type of serialized bodies.
    media_type: str = "application/json"
    #: Attach tracebacks to failure log records.
    log_tracebacks: bool = True
    #: Logger used by the translator; ``None`` uses ``routeresult.translate``.
    logger_name: str | None = None

    def __post_init__(self) -> None:
        """Validate settings early for clear errors."""
        if self.forbidden_status not in (401, 403):
            raise ConfigurationError(
                f"forbidden_status must be 401 or 403, got {self.forbidden_status!r}",
                hint="Use 403 for 'authenticated but not allowed', 401 for "
                "'not authenticated'.",
            )
        if not isinstance(self.media_type, str) or not self.media_type.strip():
            raise ConfigurationError(
                "media_type must be a non-empty string",
                hint="Pass media_type='application/json'.",
            )
        if self.logger_name is not None and (
            not isinstance(self.logger_name, str) or not self.logger_name.strip()
        ):
            raise ConfigurationError(
                "logger_name must be a non-empty string or None",
                hint="Pass logger_name='myapp.responses' or leave it unset.",
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from ``ROUTERESULT_*`` environment variables.

        A ``.env`` file is loaded first when reading the process environment.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        kwargs: dict[str, object] = {}
        raw_status = environ.get(f"{_ENV_PREFIX}FORBIDDEN_STATUS")
        if raw_status is not None:
            try:
                kwargs["forbidden_status"] = cast("ForbiddenStatus", int(raw_status))
            except ValueError as exc:
                raise ConfigurationError(
                    f"{_ENV_PREFIX}FORBIDDEN_STATUS must be an integer, got {raw_status!r}",
                    hint="Set it to 401 or 403.",
                ) from exc

        media_type = environ.get(f"{_ENV_PREFIX}MEDIA_TYPE")
        if media_type is not None:
            kwargs["media_type"] = media_type

        raw_tracebacks = environ.get(f"{_ENV_PREFIX}LOG_TRACEBACKS")
        if raw_tracebacks is not None:
            kwargs["log_tracebacks"] = _parse_bool(
                f"{_ENV_PREFIX}LOG_TRACEBACKS", raw_tracebacks
            )

        logger_name = environ.get(f"{_ENV_PREFIX}LOGGER")
        if logger_name:
            kwargs["logger_name"] = logger_name

        return cls(**kwargs)  # type: ignore[arg-type]


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {raw!r}",
        hint="Use one of: 1, 0, true, false, yes, no, on, off.",
    )


DEFAULT_CONFIG = Config()
