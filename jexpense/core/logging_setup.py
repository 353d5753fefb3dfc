"""
Configuración centralizada de logging para el paquete ``jexpense``.

Los módulos solo usan ``logging.getLogger(__name__)``; el handler se agrega
una única vez desde ``create_app`` con :func:`configure_logging`.
"""

import logging
import sys

_PKG_LOGGER_NAME = "jexpense"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    numeric = getattr(logging, level.strip().upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO) -> None:
    global _CONFIGURED

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    logger.setLevel(_parse_level(level))
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    _CONFIGURED = True
