"""Configuration for pi-prompt, read from environment variables.

``PI_PROMPT_SHELL``                shell dialect (falls back to ``$SHELL``)
``PI_PROMPT_LOG_LEVEL``            debug | info | warning | error
``PI_PROMPT_DISPLAY_VIRTUAL_ENV``  show the virtualenv name in the python segment
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from pi.prompt.formats import Shell

logger = logging.getLogger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class PromptConfig:
    """Prompt rendering configuration."""

    shell: Shell = Shell.PLAIN
    log_level: str = "warning"
    display_virtual_env: bool = True


def _get_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    raw = environ.get(key, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid boolean %s=%r", key, raw)
    return default


def load_config(environ: Mapping[str, str] | None = None) -> PromptConfig:
    """Build a :class:`PromptConfig` from *environ* (default ``os.environ``)."""
    if environ is None:
        environ = os.environ

    config = PromptConfig()
    config.shell = Shell.from_name(
        environ.get("PI_PROMPT_SHELL") or environ.get("SHELL", "")
    )

    log_level = environ.get("PI_PROMPT_LOG_LEVEL", "").strip().lower()
    if log_level in LOG_LEVELS:
        config.log_level = log_level
    elif log_level:
        logger.warning("Ignoring invalid PI_PROMPT_LOG_LEVEL=%r", log_level)

    config.display_virtual_env = _get_bool(
        environ, "PI_PROMPT_DISPLAY_VIRTUAL_ENV", True
    )
    return config
