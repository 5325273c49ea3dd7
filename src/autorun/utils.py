import logging
from typing import Optional

from .fs.core import in_autorun
from .fs.path import FSPath

logger = logging.getLogger(__name__)


# --- Custom Logging Filter ---
# Guarantees a 'subsystem' attribute on every record so the shared format
# string works for records coming from third-party libraries too.
class AutorunLogFilter(logging.Filter):
    """
    A logging filter that ensures 'subsystem' and a normalized 'name'
    are present on log records for consistent formatting.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        subsystem = getattr(record, "subsystem", None)
        if subsystem is None:
            # autorun.fs.core -> fs
            parts = record.name.split(".")
            if len(parts) > 1 and parts[0] == "autorun":
                record.subsystem = parts[1]
            else:
                record.subsystem = "external"
        else:
            record.subsystem = str(subsystem)

        if not record.name or record.name == "root":
            record.name = "DefaultLogger"

        return True


LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] [%(subsystem)s] %(message)s"


# --- Logging Setup Utility ---
def init_logging(
    level: int = logging.INFO,
    clear_existing_handlers: bool = True,
    log_file: Optional[FSPath] = None,
) -> None:
    """
    Sets up console logging, and optionally a log file under the autorun root.

    Args:
        level: The desired logging level for the root logger.
        clear_existing_handlers: If True, removes any handlers already attached to the
                                 root logger so repeated setup does not duplicate output.
        log_file: Optional root-relative path (usually inside ``fs.LOG_DIR``) to also
                  write records to. Its directory must already exist.
    """
    root_logger = logging.getLogger()

    if clear_existing_handlers:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    log_filter = AutorunLogFilter()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.addFilter(log_filter)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(in_autorun(log_file), encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.addFilter(log_filter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    logger.debug(
        f"Logging setup complete. Root logger level set to {logging.getLevelName(level)}."
    )
