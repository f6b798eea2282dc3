# config/logging_config.py
import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(module)s:%(lineno)d] - %(message)s"


def setup_logging() -> None:
    """Configura el logging raíz de la aplicación (consola y, opcionalmente, archivo)."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    # evitar handlers duplicados si uvicorn recarga el módulo
    if not any(getattr(h, "_gimnasio", False) for h in root.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        console._gimnasio = True
        root.addHandler(console)

        log_file = os.getenv("LOG_FILE")
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            file_handler._gimnasio = True
            root.addHandler(file_handler)

    logging.getLogger(__name__).debug("Logging configurado en nivel %s", level_name)
