import logging
import sys
import uuid
from pathlib import Path
from logging.handlers import RotatingFileHandler

from mdnotes.settings import APP_NAME, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]


class EnsureSessionFilter(logging.Filter):
    """Ensure record.session exists so Formatter never crashes."""
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


log = SessionAdapter(logging.getLogger(APP_NAME), {})


def setup_logging(log_path: Path = LOG_PATH, *, verbose: bool = False) -> SessionAdapter:
    """
    Configure application-wide logging.
    Returns the shared SessionAdapter logger.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Prevent duplicate handlers on repeated calls
    if logger.handlers:
        return log

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
    )

    session_filter = EnsureSessionFilter()

    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # File handler (rotating)
    fh = RotatingFileHandler(
        log_path,
        maxBytes=2 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)

    # Console handler; stderr so it never interleaves with the menu on stdout
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.INFO if verbose else logging.WARNING)
    ch.setFormatter(fmt)
    ch.addFilter(session_filter)

    logger.addHandler(fh)
    logger.addHandler(ch)

    logger.info("Logging initialized. log_file=%s", log_path)
    return log


def install_global_exception_hooks() -> None:
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
