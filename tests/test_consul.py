import http.server
import json
import threading

import pytest

from cloudless.cluster import consul
from cloudless.cluster.model import Criteria, Instance


def test_no_checks_is_passing():
    assert consul.aggregated_status([]) == consul.OK_STATUS


def test_all_passing():
    checks = [{"CheckID": "a", "Status": "passing"}, {"CheckID": "b", "Status": "passing"}]
    assert consul.aggregated_status(checks) == consul.OK_STATUS


def test_critical_wins_over_warning():
    checks = [
        {"CheckID": "a", "Status": "passing"},
        {"CheckID": "b", "Status": "warning"},
        {"CheckID": "c", "Status": "critical"},
    ]
    assert consul.aggregated_status(checks) == "critical"


def test_warning_wins_over_passing():
    checks = [{"CheckID": "a", "Status": "passing"}, {"CheckID": "b", "Status": "warning"}]
    assert consul.aggregated_status(checks) == "warning"


def test_maintenance_wins():
    checks = [
        {"CheckID": "_node_maintenance", "Status": "critical"},
        {"CheckID": "b", "Status": "critical"},
    ]
    assert consul.aggregated_status(checks) == "maintenance"


def test_unknown_status_is_empty():
    checks = [{"CheckID": "a", "Status": "bogus"}]
    assert consul.aggregated_status(checks) == ""


_NODES = [
    {
        "Node": "node-a",
        "Address": "10.0.0.1",
        "Checks": [{"CheckID": "serfHealth", "Status": "passing"}],
    },
    {
        "Node": "node-b",
        "Address": "10.0.0.2",
        "Checks": [{"CheckID": "serfHealth", "Status": "critical"}],
    },
    {"Node": "node-c", "Address": "10.0.0.3"},
]


class _Catalog(http.server.BaseHTTPRequestHandler):
    paths: list = []

    def do_GET(self):
        _Catalog.paths.append(self.path)
        body = json.dumps(_NODES).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def catalog():
    _Catalog.paths = []
    srv = http.server.ThreadingHTTPServer(("127.0.0.1", 0), _Catalog)
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()


def test_match_keeps_passing_nodes(catalog):
    criteria = Criteria(url=f"127.0.0.1:{catalog.server_address[1]}", service="web")
    instances = consul.match(criteria)
    assert instances == [
        Instance(name="node-a", private_ip="10.0.0.1"),
        Instance(name="node-c", private_ip="10.0.0.3"),
    ]
    assert _Catalog.paths == ["/v1/catalog/service/web"]


def test_match_accepts_scheme_in_url(catalog):
    criteria = Criteria(url=f"http://127.0.0.1:{catalog.server_address[1]}", service="web")
    names = [inst.name for inst in consul.match(criteria)]
    assert names == ["node-a", "node-c"]