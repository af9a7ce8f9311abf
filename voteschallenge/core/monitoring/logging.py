# Standard library imports
from collections.abc import Mapping, MutableMapping
from functools import lru_cache
import logging
import sys
from typing import Any

# Local application imports
from voteschallenge.settings import settings
from voteschallenge.utils.validators.cpf_validator import mask_cpf

# Voting identifiers are always printed in this order, before any other context
CONTEXT_ORDER = ("ruling_id", "session_id", "associate_id", "cpf")

# Context values rewritten before they reach a handler
MASKED_CONTEXT = {"cpf": mask_cpf}


class VotingFormatter(logging.Formatter):
    """
    Console formatter for the voting services; colors lines by level on a terminal.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[38;20m",
        logging.INFO: "\x1b[38;20m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }
    RESET = "\x1b[0m"

    LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    def __init__(self, use_color: bool = False):
        super().__init__(self.LOG_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_color else None
        return f"{color}{line}{self.RESET}" if color else line


def resolve_level(level: int | str | None = None) -> int:
    """LOG_LEVEL from settings wins over DEBUG_MODE; an explicit level wins over both."""
    level = level if level is not None else settings.LOG_LEVEL
    if level is None:
        return logging.DEBUG if settings.DEBUG_MODE else logging.INFO
    if isinstance(level, str):
        return logging.getLevelName(level.upper())
    return level


@lru_cache
def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """
    Get a stdout logger for the given name.

    Cached per (name, level) so repeated calls never stack handlers. Warnings
    and errors also reach Sentry in production through the logging integration
    set up in ``core.monitoring.sentry``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    resolved = resolve_level(level)
    logger.setLevel(resolved)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(VotingFormatter(use_color=sys.stdout.isatty()))
    logger.addHandler(handler)

    return logger


def format_context(context: Mapping[str, Any]) -> str:
    """
    Render context as ``key=value`` pairs, voting ids first and CPFs masked.

    Keys with a None value are left out.
    """
    ordered = [key for key in CONTEXT_ORDER if key in context]
    ordered += sorted(key for key in context if key not in CONTEXT_ORDER)

    pairs = []
    for key in ordered:
        value = context[key]
        if value is None:
            continue
        if key in MASKED_CONTEXT:
            value = MASKED_CONTEXT[key](value)
        pairs.append(f"{key}={value}")
    return " ".join(pairs)


class VotingLoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """Appends the bound voting context to every message."""

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        super().__init__(logger, dict(extra or {}))

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        context_str = format_context(self.extra or {})
        if context_str:
            msg = f"{msg} [{context_str}]"
        return msg, kwargs


def get_contextual_logger(name: str, **context: Any) -> VotingLoggerAdapter:
    return VotingLoggerAdapter(get_logger(name), context)
