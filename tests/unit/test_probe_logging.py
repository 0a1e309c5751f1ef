"""Structured logging for matcher evaluations."""

import json

import pytest

from libs.probe_matchers import ensure_exclusion_of, logging as log, validate_presence_of
from tests.tools.fakes import FakeEntity, excluding, requiring


pytestmark = pytest.mark.unit


def _events(stderr: str) -> list[dict]:
    return [json.loads(line) for line in stderr.splitlines() if line.startswith("{")]


class TestLogShape:
    def test_json_line_with_bound_context(self, capsys, monkeypatch):
        monkeypatch.setenv("JSON_LOGS", "1")
        monkeypatch.setenv("LOG_STREAM", "stderr")
        log.bind(matcher="ExclusionMatcher", skipped=None)
        try:
            log.warn("matcher.test", detail="x")
        finally:
            log.clear()

        (event,) = _events(capsys.readouterr().err)
        assert event["event"] == "matcher.test"
        assert event["level"] == "warn"
        assert event["matcher"] == "ExclusionMatcher"
        assert "skipped" not in event
        assert event["service"] == "probe-matchers"

    def test_pretty_mode(self, capsys, monkeypatch):
        monkeypatch.setenv("JSON_LOGS", "0")
        log.warn("matcher.test", detail="x")

        assert capsys.readouterr().err.startswith("[WARN] matcher.test ")

    def test_secrets_redacted(self, capsys, monkeypatch):
        monkeypatch.setenv("JSON_LOGS", "1")
        log.warn("matcher.test", detail="password=hunter2")

        (event,) = _events(capsys.readouterr().err)
        assert "hunter2" not in event["detail"]

    def test_debug_quiet_by_default(self, capsys):
        log.debug("matcher.test")
        assert capsys.readouterr().err == ""


class TestEvaluationEvents:
    def test_probe_and_matcher_events(self, capsys, debug_logs):
        ensure_exclusion_of("floors").in_range(5, 8).matches(FakeEntity(rules={"floors": excluding(range(5, 9))}))

        events = _events(capsys.readouterr().err)
        probes = [e for e in events if e["event"] == "probe.completed"]
        assert [e["value"] for e in probes] == [4, 5, 9, 8]
        assert all(e["matcher"] == "ExclusionMatcher" for e in probes)
        (done,) = [e for e in events if e["event"] == "matcher.evaluated"]
        assert done["passed"] is True
        assert done["attribute"] == "floors"

    def test_credential_values_masked(self, capsys, debug_logs):
        validate_presence_of("password").matches(FakeEntity(rules={"password": requiring()}))
        validate_presence_of("password").matches(FakeEntity())

        events = _events(capsys.readouterr().err)
        assert all(e["value"] is None for e in events if e["event"] == "probe.completed")
        assert log.redact_value("password", "hunter2") == "***"
        assert log.redact_value("arms", 2) == 2

    def test_context_cleared_after_evaluation(self, capsys, debug_logs):
        validate_presence_of("arms").matches(FakeEntity(rules={"arms": requiring()}))
        capsys.readouterr()
        log.debug("after")

        (event,) = _events(capsys.readouterr().err)
        assert "matcher" not in event
        assert "attribute" not in event
