"""Tests for request-level enforcement."""

import pytest

from seb_kiosk.application.integrity import PlaceholderRequestHashProvider
from seb_kiosk.application.request_gate import (
    HEADER_CLIENT_MARKER,
    HEADER_CLIENT_TYPE,
    HEADER_CLIENT_VERSION,
    HEADER_CONFIG_KEY,
    HEADER_CONFIG_VERSION,
    HEADER_REQUEST_HASH,
    RequestGate,
)
from seb_kiosk.domain.models import EnforcementKind, Policy
from tests.kiosk_fakes import FakeRequest, RecordingReporter


def _policy(**overrides: object) -> Policy:
    data: dict[str, object] = {"startUrl": "https://exam.example.com", "allowedDomains": ["example.com"]}
    data.update(overrides)
    return Policy.model_validate(data)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


class TestAllowedRequests:
    """Requests to allowed hosts proceed with identification headers."""

    def test_default_header_set(self, reporter: RecordingReporter) -> None:
        """Given a default policy, when a request to an allowed host is seen, then all headers are set."""
        gate = RequestGate(_policy(), PlaceholderRequestHashProvider(), reporter)
        request = FakeRequest("https://exam.example.com/q/1", "exam.example.com")

        assert gate.intercept(request) is True

        assert request.blocked is False
        assert request.headers == {
            HEADER_CLIENT_MARKER: "SEB-Linux-MVP",
            HEADER_REQUEST_HASH: "placeholder-stub-request-hash",
            HEADER_CLIENT_VERSION: "0.1.0",
            HEADER_CLIENT_TYPE: "SEB-Linux",
            HEADER_CONFIG_VERSION: "2",
            HEADER_CONFIG_KEY: "stub-value",
        }
        assert reporter.events == []

    def test_header_names_are_exact(self, reporter: RecordingReporter) -> None:
        gate = RequestGate(_policy(), PlaceholderRequestHashProvider(), reporter)
        request = FakeRequest("https://example.com/", "example.com")

        gate.intercept(request)

        assert set(request.headers) == {
            "X-SafeExamBrowser",
            "X-SafeExamBrowser-RequestHash",
            "X-SafeExamBrowser-ClientVersion",
            "X-SafeExamBrowser-ClientType",
            "X-SafeExamBrowser-ConfigVersion",
            "X-SafeExamBrowser-ConfigKey",
        }

    def test_config_key_omitted_when_disabled(self, reporter: RecordingReporter) -> None:
        """Given sendConfigKey false, when a request is allowed, then no ConfigKey header is set."""
        gate = RequestGate(_policy(sendConfigKey=False), PlaceholderRequestHashProvider(), reporter)
        request = FakeRequest("https://example.com/", "example.com")

        gate.intercept(request)

        assert HEADER_CONFIG_KEY not in request.headers
        assert len(request.headers) == 5

    def test_configured_client_identity_is_sent(self, reporter: RecordingReporter) -> None:
        policy = _policy(clientVersion="3.1.0", clientType="SEB-Kiosk")
        gate = RequestGate(policy, PlaceholderRequestHashProvider(), reporter)
        request = FakeRequest("https://example.com/", "example.com")

        gate.intercept(request)

        assert request.headers[HEADER_CLIENT_VERSION] == "3.1.0"
        assert request.headers[HEADER_CLIENT_TYPE] == "SEB-Kiosk"

    def test_request_hash_comes_from_provider(self, reporter: RecordingReporter) -> None:
        class EchoHashProvider:
            def request_hash(self, url: str) -> str:
                return f"hash:{url}"

            def config_key(self) -> str:
                return "key"

        gate = RequestGate(_policy(), EchoHashProvider(), reporter)
        request = FakeRequest("https://example.com/a", "example.com")

        gate.intercept(request)

        assert request.headers[HEADER_REQUEST_HASH] == "hash:https://example.com/a"
        assert request.headers[HEADER_CONFIG_KEY] == "key"


class TestBlockedRequests:
    """Requests to other hosts are blocked untouched."""

    def test_disallowed_host_is_blocked_without_headers(self, reporter: RecordingReporter) -> None:
        gate = RequestGate(_policy(), PlaceholderRequestHashProvider(), reporter)
        request = FakeRequest("https://evil.com/track.js", "evil.com")

        assert gate.intercept(request) is False

        assert request.blocked is True
        assert request.headers == {}

    def test_block_is_reported(self, reporter: RecordingReporter) -> None:
        gate = RequestGate(_policy(), PlaceholderRequestHashProvider(), reporter)

        gate.intercept(FakeRequest("https://evil.com/track.js", "evil.com"))

        assert len(reporter.events) == 1
        event = reporter.events[0]
        assert event.kind is EnforcementKind.REQUEST
        assert event.target == "evil.com"
        assert event.detail == "https://evil.com/track.js"

    def test_empty_allow_list_blocks_everything(self, reporter: RecordingReporter) -> None:
        gate = RequestGate(_policy(allowedDomains=[]), PlaceholderRequestHashProvider(), reporter)
        request = FakeRequest("https://exam.example.com/", "exam.example.com")

        assert gate.intercept(request) is False
        assert request.blocked is True

    def test_evaluation_failure_blocks_request(self, reporter: RecordingReporter) -> None:
        """Given a failing hash provider, when a request is allowed, then it is blocked instead."""

        class BrokenHashProvider:
            def request_hash(self, url: str) -> str:
                raise RuntimeError("boom")

            def config_key(self) -> str:
                return "key"

        gate = RequestGate(_policy(), BrokenHashProvider(), reporter)
        request = FakeRequest("https://example.com/", "example.com")

        assert gate.intercept(request) is False
        assert request.blocked is True

    def test_reporter_failure_does_not_unblock(self) -> None:
        class BrokenReporter:
            def report(self, event: object) -> None:
                raise RuntimeError("reporter down")

        gate = RequestGate(_policy(), PlaceholderRequestHashProvider(), BrokenReporter())
        request = FakeRequest("https://evil.com/", "evil.com")

        assert gate.intercept(request) is False
        assert request.blocked is True
        assert request.headers == {}
