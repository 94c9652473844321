"""Tests app FastAPI : /health + router block_supports monté."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from src.api.main import app
    with TestClient(app) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["service"] == "block_supports"


def test_router_mounted(client):
    r = client.post("/block-supports/elements/render", json={
        "block_content": '<div class="wp-block-group"><h2 class="wp-block-heading">Test</h2></div>',
        "block": {
            "blockName": "core/group",
            "attrs": {"style": {"elements": {"heading": {"color": {"text": "red"}}}}},
        },
    })
    assert r.status_code == 200
    html = r.json()["block_content"]
    assert html.startswith('<div class="wp-block-group wp-elements-')
    assert html.endswith('"><h2 class="wp-block-heading">Test</h2></div>')
