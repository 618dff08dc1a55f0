"""
Config system - Route derivation settings.

A single RouteConfig value governs how generated paths are composed.
The process keeps one current value that hosts set up before
registering controllers; each registration call snapshots it (or takes
an explicit value) so the policy cannot change mid-pass.

Sources, later overrides earlier:
1. Defaults
2. .env file (AUTOROUTE_* keys)
3. Environment variables (AUTOROUTE_* prefix)
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, fields, replace
import logging
import os

from dotenv import dotenv_values

from .faults import ConfigInvalidFault

logger = logging.getLogger("autoroute.config")

_TRUE = ("true", "yes", "1", "on")
_FALSE = ("false", "no", "0", "off")


@dataclass(frozen=True)
class RouteConfig:
    """
    Settings read while composing route paths.

    Attributes:
        append_trailing_slash: Append "/" to every generated path that
            does not already end with one.
    """

    append_trailing_slash: bool = False

    @classmethod
    def from_env(
        cls,
        env_prefix: str = "AUTOROUTE_",
        env_file: Optional[str] = None,
    ) -> "RouteConfig":
        """
        Build a config from a .env file and the process environment.

        Args:
            env_prefix: Prefix of recognised variables
            env_file: Optional path to a .env file

        Returns:
            RouteConfig with values found in the sources

        Raises:
            ConfigInvalidFault: A recognised variable has an unparseable value
        """
        values: Dict[str, Any] = {}

        sources = []
        if env_file:
            sources.append(dotenv_values(env_file))
        sources.append(os.environ)

        known = {f.name: f for f in fields(cls)}
        for source in sources:
            for key, raw in source.items():
                if not key.startswith(env_prefix) or raw is None:
                    continue
                name = key[len(env_prefix):].lower()
                if name not in known:
                    logger.debug("Ignoring unknown config key %s", key)
                    continue
                values[name] = _parse_bool(key, raw)

        return cls(**values)


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigInvalidFault(key, f"expected a boolean, got {value!r}")


_current = RouteConfig()


def get_config() -> RouteConfig:
    """Return the process-wide config."""
    return _current


def configure(config: RouteConfig) -> None:
    """
    Replace the process-wide config.

    Must not run concurrently with a registration call.
    """
    global _current
    _current = config
    logger.debug("Route config set to %r", config)


def set_append_trailing_slash(enabled: bool) -> None:
    """Toggle the trailing-slash policy for subsequent registrations."""
    configure(replace(_current, append_trailing_slash=bool(enabled)))
