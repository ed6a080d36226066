# app/utils/logger.py
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.config.settings import LOG_DIR, LOG_LEVEL
from app.utils.prometheus_metrics import record_log

LOG_FORMAT = "[%(levelname)s] [%(asctime)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MetricsHandler(logging.Handler):
    """Conta mensagens de log por nível no Prometheus."""

    def emit(self, record: logging.LogRecord) -> None:
        record_log(record.levelname)


def _build_logger() -> logging.Logger:
    log = logging.getLogger("app")
    if log.handlers:
        return log

    log.setLevel(LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    log.addHandler(console)

    try:
        log_dir = Path(LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)
    except OSError as e:
        log.warning(f"Não foi possível abrir o arquivo de log em {LOG_DIR}: {e}")

    log.addHandler(MetricsHandler())
    log.propagate = False
    return log


logger = _build_logger()
