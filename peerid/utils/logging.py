import atexit
import logging
import logging.handlers
import os
from pathlib import (
    Path,
)
import queue
import sys
from typing import (
    Any,
)

ROOT_LOGGER_NAME = "peerid"

DEBUG_ENV_VAR = "PEERID_DEBUG"
DEBUG_FILE_ENV_VAR = "PEERID_DEBUG_FILE"

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

log_queue: "queue.Queue[Any]" = queue.Queue()

_current_listener: logging.handlers.QueueListener | None = None


def _parse_debug_modules(debug_str: str) -> dict[str, int]:
    """
    Parse the PEERID_DEBUG environment variable into per-module log levels.

    Format examples:
    - "DEBUG"  # All modules at DEBUG level
    - "peerid.id:DEBUG"  # Only the peer id module at DEBUG
    - "crypto.serialization:DEBUG"  # peerid prefix is optional
    - "peerid.id:DEBUG,peerid.cid:INFO"  # Multiple modules

    Unknown level names are ignored.
    """
    module_levels: dict[str, int] = {}

    if not debug_str or debug_str.isspace():
        return module_levels

    if ":" not in debug_str and debug_str.strip().upper() in logging._nameToLevel:
        return {"": logging._nameToLevel[debug_str.strip().upper()]}

    for part in debug_str.split(","):
        if ":" not in part:
            continue

        module, level = part.rsplit(":", 1)
        level = level.strip().upper()
        if level not in logging._nameToLevel:
            continue

        module = module.strip().replace("/", ".").strip(".")
        if module == ROOT_LOGGER_NAME:
            module = ""
        elif module.startswith(ROOT_LOGGER_NAME + "."):
            module = module[len(ROOT_LOGGER_NAME) + 1 :]

        module_levels[module] = logging._nameToLevel[level]

    return module_levels


def _silence(root_logger: logging.Logger) -> None:
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    root_logger.propagate = False


def setup_logging() -> None:
    """
    Configure the ``peerid`` loggers from environment variables.

    Environment Variables:
        PEERID_DEBUG
            Log levels, either one level for everything (``"DEBUG"``) or a
            comma separated list of ``module:LEVEL`` pairs. Unset or invalid
            means WARNING and no handlers.

        PEERID_DEBUG_FILE
            If set, records are also written to this file (its directory is
            created as needed). Records always go to stderr.

    Handlers run on a ``QueueListener`` thread, stopped at interpreter exit
    or on the next call.
    """
    global _current_listener

    if _current_listener is not None:
        _current_listener.stop()
        _current_listener = None

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    module_levels = _parse_debug_modules(os.environ.get(DEBUG_ENV_VAR, ""))
    if not module_levels:
        _silence(root_logger)
        return

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    handlers: list[logging.Handler] = []
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    log_file = os.environ.get(DEBUG_FILE_ENV_VAR)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    queue_handler = logging.handlers.QueueHandler(log_queue)

    root_logger.handlers.clear()
    root_logger.addHandler(queue_handler)
    root_logger.propagate = False
    root_logger.setLevel(module_levels.get("", logging.INFO))

    for module, level in module_levels.items():
        if module:
            logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{module}")
            logger.handlers.clear()
            logger.addHandler(queue_handler)
            logger.setLevel(level)
            # already handled here, keep it away from the root handler
            logger.propagate = False

    _current_listener = logging.handlers.QueueListener(
        log_queue, *handlers, respect_handler_level=True
    )
    _current_listener.start()


@atexit.register
def cleanup_logging() -> None:
    """Stop the queue listener, flushing pending records."""
    global _current_listener
    if _current_listener is not None:
        _current_listener.stop()
        _current_listener = None
