# Local application imports
from voteschallenge.core.monitoring.logging import format_context, get_contextual_logger, get_logger
from voteschallenge.core.monitoring.sentry import scrub_event, setup_sentry_logging

__all__ = ["format_context", "get_contextual_logger", "get_logger", "scrub_event", "setup_sentry_logging"]
