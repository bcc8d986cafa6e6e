"""Request-level enforcement: block disallowed hosts, tag allowed requests."""

import logging

from seb_kiosk.application.domain_matcher import HostFilter
from seb_kiosk.domain.contracts.enforcement_reporter import EnforcementReporterProtocol
from seb_kiosk.domain.contracts.intercepted_request import InterceptedRequestProtocol
from seb_kiosk.domain.contracts.request_hash_provider import RequestHashProviderProtocol
from seb_kiosk.domain.models.enforcement_event import EnforcementEvent, EnforcementKind
from seb_kiosk.domain.models.policy import Policy

logger = logging.getLogger(__name__)

# Header names are part of the server-side contract and must not change.
HEADER_CLIENT_MARKER = "X-SafeExamBrowser"
HEADER_REQUEST_HASH = "X-SafeExamBrowser-RequestHash"
HEADER_CLIENT_VERSION = "X-SafeExamBrowser-ClientVersion"
HEADER_CLIENT_TYPE = "X-SafeExamBrowser-ClientType"
HEADER_CONFIG_VERSION = "X-SafeExamBrowser-ConfigVersion"
HEADER_CONFIG_KEY = "X-SafeExamBrowser-ConfigKey"

CLIENT_MARKER_VALUE = "SEB-Linux-MVP"
CONFIG_VERSION_VALUE = "2"


class RequestGate:
    """Runs once per outbound request, before it is dispatched.

    Disallowed hosts are blocked with no headers touched; allowed requests get
    the identification header set. Nothing raises past :meth:`intercept`.
    """

    def __init__(
        self,
        policy: Policy,
        hash_provider: RequestHashProviderProtocol,
        reporter: EnforcementReporterProtocol,
    ) -> None:
        self._filter = HostFilter(policy.allowed_domains)
        self._hash_provider = hash_provider
        self._reporter = reporter
        self._client_version = policy.get_client_version()
        self._client_type = policy.get_client_type()
        self._send_config_key = policy.send_config_key

    def intercept(self, request: InterceptedRequestProtocol) -> bool:
        """Apply the policy to ``request`` in place.

        Returns:
            True if the request may proceed, False if it was blocked.
        """
        try:
            host = request.host
            if not self._filter.allows(host):
                logger.warning(f"Blocking request to non-allowed domain: {host}")
                request.block()
                self._report(EnforcementEvent(kind=EnforcementKind.REQUEST, target=host, detail=request.url))
                return False
            self._inject_headers(request)
            return True
        except Exception:
            logger.exception("Request evaluation failed, blocking request")
            request.block()
            return False

    def _inject_headers(self, request: InterceptedRequestProtocol) -> None:
        request.set_header(HEADER_CLIENT_MARKER, CLIENT_MARKER_VALUE)
        request.set_header(HEADER_REQUEST_HASH, self._hash_provider.request_hash(request.url))
        request.set_header(HEADER_CLIENT_VERSION, self._client_version)
        request.set_header(HEADER_CLIENT_TYPE, self._client_type)
        request.set_header(HEADER_CONFIG_VERSION, CONFIG_VERSION_VALUE)
        if self._send_config_key:
            request.set_header(HEADER_CONFIG_KEY, self._hash_provider.config_key())

    def _report(self, event: EnforcementEvent) -> None:
        try:
            self._reporter.report(event)
        except Exception:
            logger.exception("Enforcement reporter failed")
