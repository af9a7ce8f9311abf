"""Tests for log context rendering and Sentry scrubbing."""

import logging

import pytest

from voteschallenge.core.monitoring.logging import (
    VotingFormatter,
    format_context,
    get_contextual_logger,
    resolve_level,
)
from voteschallenge.core.monitoring.sentry import scrub_cpf, scrub_event


class TestFormatContext:
    def test_voting_ids_come_first_in_fixed_order(self):
        context = {"attempt": 2, "cpf": "52998224725", "associate_id": "a1", "session_id": "s1"}

        assert format_context(context) == "session_id=s1 associate_id=a1 cpf=529.***.***-25 attempt=2"

    def test_cpf_is_never_logged_in_clear(self):
        assert "52998224725" not in format_context({"cpf": "529.982.247-25"})

    def test_none_values_are_skipped(self):
        assert format_context({"ruling_id": None, "session_id": "s1"}) == "session_id=s1"

    def test_empty_context(self):
        assert format_context({}) == ""


def test_adapter_appends_context():
    adapter = get_contextual_logger("tests.monitoring", cpf="52998224725", session_id="s1")

    message, _ = adapter.process("Vote computed", {})

    assert message == "Vote computed [session_id=s1 cpf=529.***.***-25]"


def test_adapter_without_context_keeps_message():
    message, _ = get_contextual_logger("tests.monitoring").process("Ruling created", {})

    assert message == "Ruling created"


class TestVotingFormatter:
    def make_record(self, level):
        return logging.LogRecord("voteschallenge", level, __file__, 1, "Session opened", None, None)

    def test_plain_output(self):
        line = VotingFormatter().format(self.make_record(logging.INFO))

        assert line.endswith("INFO     voteschallenge: Session opened")
        assert "\x1b[" not in line

    def test_colored_output(self):
        line = VotingFormatter(use_color=True).format(self.make_record(logging.ERROR))

        assert line.startswith("\x1b[31;20m")
        assert line.endswith("\x1b[0m")


@pytest.mark.parametrize(
    "level, expected",
    [("warning", logging.WARNING), ("DEBUG", logging.DEBUG), (logging.ERROR, logging.ERROR)],
)
def test_resolve_explicit_level(level, expected):
    assert resolve_level(level) == expected


class TestScrubbing:
    @pytest.mark.parametrize("text", ["cpf 52998224725 failed", "cpf 529.982.247-25 failed"])
    def test_scrub_cpf(self, text):
        assert scrub_cpf(text) == "cpf 529.***.***-25 failed"

    def test_longer_digit_runs_are_left_alone(self):
        assert scrub_cpf("order 1529982247251") == "order 1529982247251"

    def test_scrub_event(self):
        event = {
            "logentry": {"message": "Vote rejected for 52998224725", "formatted": "Vote rejected for 52998224725"},
            "exception": {"values": [{"type": "ValueError", "value": "Invalid CPF 529.982.247-25"}]},
        }

        scrubbed = scrub_event(event, None)

        assert scrubbed["logentry"]["formatted"] == "Vote rejected for 529.***.***-25"
        assert scrubbed["exception"]["values"][0]["value"] == "Invalid CPF 529.***.***-25"
