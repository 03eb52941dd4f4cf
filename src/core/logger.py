"""Logger del runtime.

Un único logger de paquete (`typesync`); los módulos lo importan en vez de
crear el suyo. El nivel se ajusta desde variables de entorno.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger("typesync")


def configure_from_env(
    primary_env_var: str = "TYPESYNC_LOG_LEVEL", fallback_env_var: str = "LOG_LEVEL"
) -> int:
    # TYPESYNC_LOG_LEVEL gana; LOG_LEVEL queda como compatibilidad.
    chosen_var = primary_env_var if os.getenv(primary_env_var) else fallback_env_var
    value = os.getenv(chosen_var)

    default_level = logging.INFO
    level = getattr(logging, value.upper(), None) if value else default_level
    if not isinstance(level, int):
        level = default_level
    logger.setLevel(level)

    effective_name = logging.getLevelName(level)
    if value and not isinstance(getattr(logging, value.upper(), None), int):
        logger.warning(
            "%s='%s' is invalid; defaulting to %s", chosen_var, value, effective_name
        )
    else:
        logger.debug("log level set to %s", effective_name)
    return level


__all__ = ["logger", "configure_from_env"]
