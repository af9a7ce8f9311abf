# Standard library imports
import logging
import re
from typing import Any

# Third-party imports
import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

# Local application imports
from voteschallenge.settings import settings
from voteschallenge.utils.validators.cpf_validator import mask_cpf

# Formatted or bare 11-digit CPFs inside free text
_CPF_IN_TEXT = re.compile(r"(?<![0-9])[0-9]{3}\.?[0-9]{3}\.?[0-9]{3}-?[0-9]{2}(?![0-9])")


def scrub_cpf(text: str) -> str:
    return _CPF_IN_TEXT.sub(lambda match: mask_cpf(match.group()), text)


def scrub_event(event: dict[str, Any], hint: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    ``before_send`` hook: mask CPFs in log messages and exception values.
    """
    logentry = event.get("logentry") or {}
    for key in ("message", "formatted"):
        if isinstance(logentry.get(key), str):
            logentry[key] = scrub_cpf(logentry[key])

    for exception in (event.get("exception") or {}).get("values") or []:
        if isinstance(exception.get("value"), str):
            exception["value"] = scrub_cpf(exception["value"])

    return event


def setup_sentry_logging() -> None:
    """
    Send warnings (as breadcrumbs) and errors (as events) to Sentry.

    Only active in production with a configured DSN.
    """
    if settings.ENVIRONMENT != "production" or not settings.SENTRY_DSN:
        return

    if sentry_sdk.is_initialized():
        return

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        integrations=[LoggingIntegration(level=logging.WARNING, event_level=logging.ERROR)],
        environment=settings.ENVIRONMENT,
        send_default_pii=False,
        before_send=scrub_event,
        traces_sample_rate=1.0,
    )


setup_sentry_logging()
