"""Logger de la aplicación.

Por qué Rich + logging estándar:
- La salida de la CLI (stdout) es el contrato; los logs van siempre a stderr
  vía `RichHandler` y, opcionalmente, a un fichero rotativo.
- Nunca se loguean credenciales ni tokens: solo método, URL y status.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME: Final[str] = "related_artists"

logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(
    level: int | str = logging.WARNING,
    log_file: Path | None = None,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Configura handlers del logger compartido (idempotente)."""

    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True, soft_wrap=True),
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(level.upper() if isinstance(level, str) else level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved = Path(log_file).expanduser().resolve()
        resolved.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            resolved,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
