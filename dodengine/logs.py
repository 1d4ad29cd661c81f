"""Log manager writing to a file, the console and an in-memory ring."""

import copy
import enum
from collections import deque
from datetime import datetime

DEVELOPMENT_BUILD = True
DEFAULT_LOG_FILE = "logs.txt"
MAX_INTERNAL_LOG_COUNT = 100


class LogLevel(enum.IntEnum):
    NORMAL = 0
    WARNING = 1
    ERROR = 2


def format_log(message: str, level: LogLevel = LogLevel.NORMAL,
               now: datetime | None = None) -> str:
    """Format one log line with a timestamp and level tag."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    tag = {LogLevel.WARNING: "[warning]", LogLevel.ERROR: "[error]"}.get(level, "")
    return f"#{stamp}{tag}: {message}\n"


def log_to_file(file_name, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
    """Append a formatted line to ``file_name``; silently gives up if it cannot be opened."""
    try:
        with open(file_name, "a", encoding="utf-8") as f:
            f.write(format_log(message, level))
    except OSError:
        return


class LogManager:
    """Collects log lines; an empty name means the default log file."""

    MAX_INTERNAL_LOG_COUNT = MAX_INTERNAL_LOG_COUNT

    def __init__(self, name: str = ""):
        self.name = name
        self.first_log_already_placed = False
        self.internal_logs: deque[str] = deque(maxlen=MAX_INTERNAL_LOG_COUNT)

    def init(self, name: str) -> None:
        self.name = name
        self.first_log_already_placed = False

    def log(self, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
        if DEVELOPMENT_BUILD:
            self.log_internally(message, level)
            self.log_to_file(message, level)
            self.log_to_console(message, level)
        else:
            self.log_to_file(message, level)
            self.log_internally(message, level)

    def log_to_file(self, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
        if not self.name:
            self.name = DEFAULT_LOG_FILE
        if not self.first_log_already_placed:
            self.first_log_already_placed = True
            try:
                open(self.name, "w", encoding="utf-8").close()
            except OSError:
                pass
        log_to_file(self.name, message, level)

    def log_internally(self, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
        self.internal_logs.append(format_log(message, level))

    def log_to_console(self, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
        print(format_log(message, level), end="")


_logs_manager = LogManager()


def log(message: str, level: LogLevel = LogLevel.NORMAL) -> None:
    """Log through the process-wide manager."""
    _logs_manager.log(message, level)


def get_logs_manager() -> LogManager:
    """Return a copy of the process-wide manager."""
    return copy.deepcopy(_logs_manager)