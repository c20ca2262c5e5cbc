"""
Hybrid logging - one named logger, per-class tags, colored console output
"""

import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s'
DEFAULT_CLASS_NAME = 'Main'


class ColoredFormatter(logging.Formatter):
    """Bracketed [time] [level] [class] layout, ANSI-colored per level on a terminal"""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[94m',     # Blue
        logging.INFO: '\033[92m',      # Green
        logging.WARNING: '\033[93m',   # Yellow
        logging.ERROR: '\033[91m',     # Red
        logging.CRITICAL: '\033[95m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = False):
        super().__init__(LOG_FORMAT)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        # Records from plain logging calls carry no class tag
        if not hasattr(record, 'class_name'):
            record.class_name = DEFAULT_CLASS_NAME

        text = super().format(record)
        if not self.use_colors:
            return text
        return f"{self.LEVEL_COLORS.get(record.levelno, self.RESET)}{text}{self.RESET}"


class ClassLogger:
    """
    Logger handle for one component.

    Every message is tagged with the component name and dropped below
    the component's own level; all handles share the main logger's handlers.
    """

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def log(self, level: int, message: str, exception: Optional[BaseException] = None) -> None:
        if level < self.level:
            return
        exc_info = (type(exception), exception, exception.__traceback__) if exception else None
        self.main_logger.log(level, message, exc_info=exc_info, extra={'class_name': self.class_name})

    def debug(self, message: str) -> None:
        self.log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self.log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[BaseException] = None) -> None:
        """
        Log an error.

        With an exception, the message gets its type plus the file and line
        where it was raised, followed by the full traceback.
        """
        if exception is None:
            self.log(logging.ERROR, message)
            return

        frames = traceback.extract_tb(exception.__traceback__)
        origin = f"{frames[-1].filename} | Line: {frames[-1].lineno}" if frames else "unknown | Line: 0"
        self.log(logging.ERROR, f"{message} | Type: {type(exception).__name__} | File: {origin}", exception)
        self.flush()

    def critical(self, message: str) -> None:
        self.log(logging.CRITICAL, message)

    def create_class_logger(self, class_name: str, level: Optional[int] = None) -> 'ClassLogger':
        """
        Derive a handle for another component on the same main logger.

        Args:
            class_name: Tag shown in the [class] column
            level: Minimum level, this handle's level when None

        Returns:
            ClassLogger
        """
        return ClassLogger(self.main_logger, class_name, self.level if level is None else level)

    def flush(self) -> None:
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()


class HybridLogger:
    """
    Owns the main logger of a run and hands out ClassLoggers.

    Logs go to stdout, colored when stdout is a terminal. Passing log_dir
    adds an uncolored, timestamped log file in that directory.

    Usage:
        with HybridLogger("Hangman") as logger:
            logger.info("started")
    """

    def __init__(self, name: str = "app", log_dir: Optional[str] = None):
        self.name = name
        self.log_dir = log_dir
        self.class_loggers: Dict[str, ClassLogger] = {}

        self.main_logger = logging.getLogger(name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        # A second HybridLogger with the same name replaces the first one's output
        self.main_logger.handlers.clear()

        self._add_handler(logging.StreamHandler(sys.stdout), use_colors=sys.stdout.isatty())
        if log_dir is not None:
            self._add_handler(logging.FileHandler(self._log_file_path(), encoding="utf-8"), use_colors=False)

    def __enter__(self) -> ClassLogger:
        return self.get_main_logger()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def _log_file_path(self) -> Path:
        directory = Path(self.log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        return directory / f"{self.name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"

    def _add_handler(self, handler: logging.Handler, use_colors: bool) -> None:
        handler.setFormatter(ColoredFormatter(use_colors=use_colors))
        self.main_logger.addHandler(handler)

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Get the logger for a component, created on first request.

        Args:
            class_name: Tag shown in the [class] column
            level: Minimum level (only applied when the logger is created)

        Returns:
            ClassLogger
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(self.main_logger, class_name, level)
        return self.class_loggers[class_name]

    def get_main_logger(self, level: int = logging.INFO) -> ClassLogger:
        return self.get_class_logger(DEFAULT_CLASS_NAME, level)

    def cleanup(self) -> None:
        """Flush and close every handler"""
        for handler in list(self.main_logger.handlers):
            with suppress(OSError, ValueError):
                handler.flush()
                handler.close()
            self.main_logger.removeHandler(handler)
