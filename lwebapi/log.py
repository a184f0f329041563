"""Console and file logging with coloured console output."""

from __future__ import annotations

import contextlib
import inspect
import os
import re
import threading
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from termcolor import colored

if TYPE_CHECKING:
    from lwebapi.models import Config

DEFAULT_LOG_PATH = Path("logs") / "app.log"

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
_THIS_FILE = os.path.normcase(os.path.abspath(__file__))


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_ESCAPE.sub("", text)


def _caller_location() -> str:
    frame = inspect.currentframe()
    try:
        while frame is not None and (
            os.path.normcase(os.path.abspath(frame.f_code.co_filename)) == _THIS_FILE
        ):
            frame = frame.f_back
        if frame is None:
            return "[?:0]"
        filename = frame.f_code.co_filename
        with contextlib.suppress(ValueError):
            filename = os.path.relpath(filename)
        return f"[{filename}:{frame.f_lineno}]"
    finally:
        del frame


class Logger:
    """Writes coloured lines to stdout and plain timestamped lines to a file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def logline(self, message: str) -> None:
        """Log one line, prefixed with the caller's file and line."""
        location = colored(_caller_location(), attrs=["dark"])
        console_output = f"{location} {message}"
        print(console_output)

        stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{stamp}] {strip_ansi(console_output)}\n"
        with self._lock, contextlib.suppress(OSError):
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line)

    def info(self, message: str) -> None:
        self.logline(f"{colored('[INFO]', 'blue')} {message}")

    def warn(self, message: str) -> None:
        self.logline(
            f"{colored('[WARN]', on_color='on_yellow')} {colored(message, 'yellow')}"
        )

    def error(self, message: str) -> None:
        self.logline(
            f"{colored('[ERROR]', on_color='on_red')} {colored(message, 'light_red')}"
        )


_default_logger: Logger | None = None
_default_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the process-wide logger writing to logs/app.log."""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = Logger(DEFAULT_LOG_PATH)
        return _default_logger


def logline(message: str) -> None:
    get_logger().logline(message)


def log_info(message: str) -> None:
    get_logger().info(message)


def log_warn(message: str) -> None:
    get_logger().warn(message)


def log_error(message: str) -> None:
    get_logger().error(message)


def print_basic_info(config: Config) -> None:
    """Print the start-up banner with version and listen address."""
    logger = get_logger()
    print()
    logger.logline(
        colored(
            " ----------------------------LWEB-API---------------------------- ",
            on_color="on_blue",
            attrs=["bold"],
        )
    )
    logger.logline(f"{colored('版本：', attrs=['dark'])}{colored(config.version, 'cyan')}")
    address = f"http://{config.host}:{config.port}"
    logger.logline(
        f"{colored('地址：', attrs=['dark'])}"
        f"{colored(address, 'light_green', attrs=['underline'])}"
    )
    logger.logline(
        colored(
            " ---------------------------------------------------------------- ",
            on_color="on_blue",
            attrs=["bold"],
        )
    )
    print()