"""Structured logging utilities with context support.

A LogContext attaches fields such as ``run_id`` and ``vector_num`` to
every record logged on the current thread while it is active.
"""

import functools
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Optional

_thread_local = threading.local()


def _current_context() -> Dict[str, Any]:
    return getattr(_thread_local, "context", {})


def generate_run_id() -> str:
    """Generate a unique ID for one batch run (a UUID4 string)."""
    return str(uuid.uuid4())


def get_log_context() -> Dict[str, Any]:
    """
    Get a copy of the fields currently attached to log records.

    Returns:
        Context fields of the current thread (empty if none)
    """
    return dict(_current_context())


class LogContext:
    """
    Context manager adding structured fields to log records.

    Contexts nest: inner fields are merged over the outer ones and the
    outer fields are restored on exit, also when the block raises.

    Example:
        with LogContext(run_id=run_id):
            for vector in vectors:
                with LogContext(vector_num=vector.num):
                    logger.warning("Amount mismatch")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._saved: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        self._saved = _current_context()
        _thread_local.context = {**self._saved, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _thread_local.context = self._saved or {}


class _ContextFilter(logging.Filter):
    """Copy the active LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _current_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator logging function entry, exit and exceptions.

    Exceptions are logged at the same level as entry and exit, without a
    traceback, and re-raised unchanged.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level name to use

    Example:
        @log_function_call
        def charge(start_text, end_text):
            ...

        @log_function_call(include_args=True, level="INFO")
        def evaluate_vectors(vectors):
            ...
    """
    log_level = getattr(logging, level.upper())

    def decorator(f: Callable) -> Callable:
        logger = logging.getLogger(f.__module__)

        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            entering = f"Entering {f.__name__}"
            if include_args:
                signature = ", ".join(
                    [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
                )
                entering = f"{entering} with args: {signature}"
            logger.log(log_level, entering)

            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.log(
                    log_level, f"Exception in {f.__name__}: {type(e).__name__}: {e}"
                )
                raise

            logger.log(log_level, f"Exiting {f.__name__}")
            return result

        return wrapper

    return decorator if func is None else decorator(func)
