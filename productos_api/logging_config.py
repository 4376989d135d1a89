# productos_api/logging_config.py
from __future__ import annotations

from logging.config import dictConfig


def setup_logging(level: str = "INFO") -> None:
    """
    Configuración centralizada de logging para la aplicación y uvicorn.
    - Se controla desde .env (LOG_LEVEL)
    - Los loggers "productos_api.*" no tienen handler propio: propagan a root,
      así un solo handler escribe cada registro y los handlers externos
      instalados en root los reciben.
    """
    level = (level or "INFO").upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": level,
                },
            },
            "loggers": {
                # Loggers de la aplicación: salen por root
                "productos_api": {"level": level, "propagate": True},
                # Loggers de uvicorn
                "uvicorn": {"handlers": ["console"], "level": level, "propagate": False},
                "uvicorn.error": {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                },
                "uvicorn.access": {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                },
            },
            "root": {"handlers": ["console"], "level": level},
        }
    )
