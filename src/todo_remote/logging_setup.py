# src/todo_remote/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "todo.log"

# Request/response dumps from the HTTP event hooks; file-only unless something goes wrong.
WIRE_LOGGER = "todo_remote.remote.http_client"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the REPL readable while the log file keeps everything:
    - todo_remote records pass, except HTTP wire dumps below WARNING
    - everything else (httpx, httpcore, asyncio, py.warnings) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == WIRE_LOGGER:
            return record.levelno >= logging.WARNING
        if record.name.startswith("todo_remote."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Install stderr + <log_dir>/todo.log handlers on the root logger.

    Replaces whatever handlers were there, so calling it twice does not double output.
    With the default file_level the file also receives the HTTP bodies logged by the
    client hooks (TODO_HTTP_LOG_BODIES).
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    logfile = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
    logfile.setLevel(file_level)
    logfile.setFormatter(fmt)
    root.addHandler(logfile)

    logging.captureWarnings(True)

    # httpx logs one INFO line per request on its own; the wire hooks already cover that.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)
