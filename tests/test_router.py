"""
Tests API — endpoints sans état (render/parse/catalog/variables) + sessions d'édition.
"""
import pytest
from fastapi.testclient import TestClient

from email_builder.app import app
from email_builder.editor.sessions import store


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def client():
    store.clear()
    with TestClient(app) as c:
        yield c
    store.clear()


def _open(client, **body) -> dict:
    r = client.post("/email-builder/sessions", json=body)
    assert r.status_code == 201
    return r.json()


# ── Sans état ────────────────────────────────────────────────────────────────

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["service"] == "email_builder"


def test_render_document(client):
    r = client.post("/email-builder/render", json={"blocks": [
        {"kind": "text", "id": "a", "content": "Olá"},
        {"kind": "divider", "id": "b"},
    ]})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Olá</p>" in r.text
    assert "<hr" in r.text


def test_render_rejects_duplicate_ids(client):
    r = client.post("/email-builder/render", json={"blocks": [
        {"kind": "divider", "id": "a"},
        {"kind": "divider", "id": "a"},
    ]})
    assert r.status_code == 422


def test_parse_html(client):
    r = client.post("/email-builder/parse", json={"html": "<div><span>hello</span><hr/></div>"})
    assert r.status_code == 200
    blocks = r.json()["blocks"]
    assert [b["kind"] for b in blocks] == ["text", "divider"]
    assert blocks[0]["content"] == "hello"


def test_parse_blank(client):
    r = client.post("/email-builder/parse", json={"html": "   "})
    assert r.json() == {"blocks": []}


def test_catalog(client):
    blocks = client.get("/email-builder/catalog").json()["blocks"]
    assert [b["kind"] for b in blocks] == ["text", "image", "button", "divider"]
    assert "properties" in blocks[0]["schema"]


def test_variables_filtered(client):
    r = client.get("/email-builder/variables", params={"campaign_type": "reset_senha"})
    assert [v["value"] for v in r.json()["variables"]] == ["{{nome_cliente}}"]


# ── Sessions ─────────────────────────────────────────────────────────────────

class TestSessions:
    def test_open_seeded(self, client):
        data = _open(client, initial_html='<div style="max-width: 600px"><p>Oi</p></div>')
        assert [b["kind"] for b in data["blocks"]] == ["text"]
        assert "Oi</p>" in data["preview_html"]

    def test_unknown_session(self, client):
        assert client.get("/email-builder/sessions/nope").status_code == 404
        assert client.post("/email-builder/sessions/nope/save").status_code == 404

    def test_full_editing_flow(self, client):
        sid = _open(client, lang="pt")["session_id"]

        r = client.post(f"/email-builder/sessions/{sid}/blocks", json={"kind": "text"})
        assert r.status_code == 201
        text_id = r.json()["block"]["id"]
        button_id = client.post(f"/email-builder/sessions/{sid}/blocks", json={"kind": "button"}).json()["block"]["id"]
        divider_id = client.post(f"/email-builder/sessions/{sid}/blocks", json={"kind": "divider"}).json()["block"]["id"]

        r = client.patch(f"/email-builder/sessions/{sid}/blocks/{button_id}", json={"text": "Comprar", "url": "https://x"})
        assert r.status_code == 200
        assert "Comprar</a>" in r.json()["preview_html"]

        r = client.post(f"/email-builder/sessions/{sid}/move", json={"source_id": divider_id, "target_id": text_id})
        assert [b["id"] for b in r.json()["blocks"]] == [divider_id, text_id, button_id]

        r = client.delete(f"/email-builder/sessions/{sid}/blocks/{text_id}")
        assert [b["id"] for b in r.json()["blocks"]] == [divider_id, button_id]

        r = client.post(f"/email-builder/sessions/{sid}/save")
        assert r.status_code == 200
        html = r.json()["html"]
        assert html.index("<hr") < html.index("Comprar")
        assert client.get(f"/email-builder/sessions/{sid}").status_code == 404

    def test_insert_reset_button(self, client):
        sid = _open(client, lang="pt")["session_id"]
        r = client.post(f"/email-builder/sessions/{sid}/blocks", json={"kind": "reset_password"})
        assert r.json()["block"]["url"] == "{{url_reset}}"

    def test_insert_unknown_kind(self, client):
        sid = _open(client)["session_id"]
        r = client.post(f"/email-builder/sessions/{sid}/blocks", json={"kind": "video"})
        assert r.status_code == 422

    def test_invalid_patch(self, client):
        sid = _open(client)["session_id"]
        bid = client.post(f"/email-builder/sessions/{sid}/blocks", json={"kind": "image"}).json()["block"]["id"]
        r = client.patch(f"/email-builder/sessions/{sid}/blocks/{bid}", json={"caption": "x"})
        assert r.status_code == 422

    def test_cancel(self, client):
        sid = _open(client)["session_id"]
        r = client.delete(f"/email-builder/sessions/{sid}")
        assert r.json()["cancelled"] is True
        assert len(store) == 0
