"""Fixtures for resource API tests."""

import pytest

from iamport_client.core.http_client import IamportHttpClient
from iamport_client.core.transport import RecordingTransport, default_envelope


class RoutedTransport(RecordingTransport):
    """RecordingTransport answering by path; unrouted paths fall back to default_envelope."""

    def __init__(self):
        super().__init__(self._route)
        self.routes = {}

    def _route(self, request):
        path = request.url.split("://", 1)[1].split("/", 1)[1]
        key = (request.method, "/" + path)
        if key in self.routes:
            return self.routes[key]
        return default_envelope(request)


@pytest.fixture
def routed_transport():
    return RoutedTransport()


@pytest.fixture
def api_client(options, routed_transport):
    return IamportHttpClient(options, transport=routed_transport)
