import json

import pytest
from fastapi.testclient import TestClient

from customer_api.app.core.config import Settings
from customer_api.app.main import create_app


def make_customer(guid="a", first_name="Jane", last_name="Doe", email=None, address="1 Main St"):
    return {
        "guid": guid,
        "first_name": first_name,
        "last_name": last_name,
        "email": email or f"{guid}@example.com",
        "address": address,
    }


@pytest.fixture
def snapshot_path(tmp_path):
    # Not created by default: a missing file means an empty store.
    return tmp_path / "customers.json"


@pytest.fixture
def write_snapshot(snapshot_path):
    def _write(content):
        if not isinstance(content, str):
            content = json.dumps(content)
        snapshot_path.write_text(content, encoding="utf-8")
        return snapshot_path

    return _write


@pytest.fixture
def make_client(snapshot_path):
    """Factory yielding a started TestClient bound to ``snapshot_path``."""
    clients = []

    def _make():
        app = create_app(Settings(data_file=str(snapshot_path)))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
