import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # we always log in local context
    current_level = LEVELS.get(config.log_level, 2)  # default to info
    request_level = LEVELS.get(level.lower(), 2)
    return request_level >= current_level


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = []
    formatted_parts = []

    for arg in args:
        if isinstance(arg, Exception):
            exceptions.append(arg)
            formatted_parts.append(f"! {type(arg).__name__} (see below)")
        elif hasattr(arg, "model_dump"):
            formatted_parts.append(f"{type(arg).__name__}: {arg.model_dump(mode = 'json')}")
        else:
            formatted_parts.append(str(arg))

    if not formatted_parts:
        return "", exceptions
    if len(formatted_parts) == 1:
        return formatted_parts[0], exceptions

    # no exceptions: close the tree with the last line
    if not exceptions:
        head_lines = "\n ├─ ".join(formatted_parts[:-1])
        return f"{head_lines}\n └─ {formatted_parts[-1]}", exceptions

    # exceptions are printed below, so the tree stays open
    return "\n ├─ ".join(formatted_parts), exceptions


def _format_trace(exception: Exception) -> str | None:
    if not exception.__traceback__:
        return None
    return "".join(traceback.format_tb(exception.__traceback__)).strip()


def _print_locally(level: str, message: str, exceptions: list[Exception], print_message: bool):
    if print_message:
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := _format_trace(exception):
            print(trace, file = sys.stderr)


def _log_to_server(level: str, message: str, exceptions: list[Exception], print_message: bool):
    if print_message:
        match level:
            case "TRACE" | "DEBUG":
                logger.debug(message)
            case "INFO":
                logger.info(message)
            case "WARN":
                logger.warning(message)
            case "ERROR":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {exception}")
        if trace := _format_trace(exception):
            logger.error(f"Details:\n └─ {trace}")


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    print_message = _should_log(level)
    if not print_message and not exceptions:
        return message

    if config.log_level == "local":
        _print_locally(level, message, exceptions, print_message)
        return message

    try:
        _log_to_server(level, message, exceptions, print_message)
    except Exception:
        # uvicorn logger is not always configured (e.g. in scripts)
        _print_locally(level, message, exceptions, print_message)
    return message


def t(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("TRACE", message, exceptions)


def d(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("DEBUG", message, exceptions)


def i(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("INFO", message, exceptions)


def w(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("WARN", message, exceptions)


def e(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("ERROR", message, exceptions)
