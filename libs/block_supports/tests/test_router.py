"""Tests router FastAPI : render elements + catalogue des blocs."""
import re

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from block_supports.router import router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    with TestClient(app) as c:
        yield c


# ── POST /block-supports/elements/render ────────────────────────────────────

def test_render_link_color(client):
    r = client.post("/block-supports/elements/render", json={
        "block_content": '<p id="anchor">Hello <a href="/">x</a></p>',
        "block": {
            "blockName": "core/paragraph",
            "attrs": {"style": {"elements": {"link": {"color": {"text": "var:preset|color|vivid-red"}}}}},
        },
    })
    assert r.status_code == 200
    data = r.json()
    class_name = data["class_name"]
    assert re.fullmatch(r"wp-elements-[0-9a-f]{32}", class_name)
    assert data["block_content"] == f'<p class="{class_name}" id="anchor">Hello <a href="/">x</a></p>'
    assert data["css"] == f".{class_name} a:where(:not(.wp-element-button)){{color:var(--wp--preset--color--vivid-red);}}"


def test_render_ignores_stale_generated_class(client):
    r = client.post("/block-supports/elements/render", json={
        "block_content": "<p>x</p>",
        "block": {
            "blockName": "core/paragraph",
            "attrs": {
                "className": "wp-elements-abc",
                "style": {"elements": {"link": {"color": {"text": "red"}}}},
            },
        },
    })
    assert r.status_code == 200
    data = r.json()
    class_name = data["class_name"]
    assert class_name != "wp-elements-abc"
    assert data["block_content"] == f'<p class="{class_name}">x</p>'
    assert data["css"].startswith(f".{class_name} ")


def test_render_without_element_styles(client):
    r = client.post("/block-supports/elements/render", json={
        "block_content": "<p>x</p>",
        "block": {"blockName": "core/paragraph", "attrs": {}},
    })
    assert r.status_code == 200
    assert r.json() == {"block_content": "<p>x</p>", "class_name": None, "css": ""}


def test_render_missing_block_is_422(client):
    r = client.post("/block-supports/elements/render", json={"block_content": "<p>x</p>"})
    assert r.status_code == 422


# ── GET /block-supports/block-types ─────────────────────────────────────────

def test_list_block_types(client):
    r = client.get("/block-supports/block-types")
    assert r.status_code == 200
    names = [bt["name"] for bt in r.json()["block_types"]]
    assert "core/paragraph" in names


def test_get_block_type(client):
    r = client.get("/block-supports/block-types/core/button")
    assert r.status_code == 200
    assert r.json()["supports"]["color"]["__experimentalSkipSerialization"] is True


def test_get_unknown_block_type_404(client):
    r = client.get("/block-supports/block-types/acme/none")
    assert r.status_code == 404
