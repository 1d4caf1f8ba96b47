"""
projects-api/logging_config.py
Configuration du logging
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER = "projects_api"
MANAGED_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error", APP_LOGGER]


class ColoredFormatter(logging.Formatter):
    """Formatter avec couleurs pour le terminal"""

    COLORS = {
        'DEBUG': '\033[0;36m',    # Cyan
        'INFO': '\033[0;32m',     # Vert
        'WARNING': '\033[0;33m',  # Jaune
        'ERROR': '\033[0;31m',    # Rouge
        'CRITICAL': '\033[1;31m', # Rouge gras
    }
    RESET = '\033[0m'

    def format(self, record):
        # Copie : les autres handlers doivent voir le niveau sans codes ANSI
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def _build_handlers(numeric_level: int, console_formatter: logging.Formatter,
                    log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    # Handler console
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    handlers.append(console_handler)

    # Handler fichier (optionnel, jamais coloré)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        )
        handlers.append(file_handler)

    return handlers


def _install(numeric_level: int, handlers: List[logging.Handler]) -> None:
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )

    for logger_name in MANAGED_LOGGERS:
        log = logging.getLogger(logger_name)
        log.setLevel(numeric_level)
        log.handlers.clear()
        for handler in handlers:
            log.addHandler(handler)
        log.propagate = False

    # Les requêtes SQL ne sont tracées qu'en DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if numeric_level <= logging.DEBUG else logging.WARNING
    )
    logging.getLogger("watchfiles").setLevel(logging.WARNING)


def setup_logging(log_level: str = "INFO", log_file: str = None):
    """Configure le logging standard"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    handlers = _build_handlers(
        numeric_level, logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT), log_file
    )
    _install(numeric_level, handlers)

    logger = logging.getLogger(APP_LOGGER)
    logger.info("✅ Logging configured")
    return logger


def setup_colored_logging(log_level: str = "INFO", log_file: str = None):
    """Configure le logging avec couleurs"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    handlers = _build_handlers(
        numeric_level, ColoredFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT), log_file
    )
    _install(numeric_level, handlers)

    logger = logging.getLogger(APP_LOGGER)
    logger.info("✅ Colored logging configured")
    return logger


def get_uvicorn_log_config(log_level: str = "INFO"):
    """Configuration de logging pour Uvicorn"""
    level = log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATE_FORMAT,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            name: {"handlers": ["default"], "level": level, "propagate": False}
            for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
        },
    }
