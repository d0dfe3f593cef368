"""Tests blocs + Document — instantiation, union discriminée, unicité des ids, fabrique."""
import pytest
from pydantic import ValidationError

from email_builder.blocks import TextBlock, ImageBlock, ButtonBlock, DividerBlock
from email_builder.core.schemas import Document
from email_builder.core.ids import IdGenerator
from email_builder.core.factory import new_block, new_reset_button


# ── Blocs ────────────────────────────────────────────────────────────────────

def test_text_block_defaults():
    b = TextBlock(id="t1")
    assert b.kind == "text"
    assert b.content == ""
    assert b.font_size is None
    assert b.color is None
    assert b.font_weight is None


def test_button_block_empty_url_is_valid():
    b = ButtonBlock(id="b1", text="Comprar", url="")
    assert b.url == ""
    assert b.background_color is None


def test_block_rejects_unknown_field():
    with pytest.raises(ValidationError):
        ImageBlock(id="i1", src="a.png", caption="non")


# ── Document ─────────────────────────────────────────────────────────────────

def test_document_validates_discriminated_blocks():
    doc = Document.model_validate({"blocks": [
        {"kind": "text", "id": "a", "content": "Olá"},
        {"kind": "divider", "id": "b"},
        {"kind": "button", "id": "c", "text": "Ir", "url": "https://x"},
        {"kind": "image", "id": "d", "src": "/img.png", "alt": "logo"},
    ]})
    assert doc.kinds() == ["text", "divider", "button", "image"]
    assert isinstance(doc.blocks[2], ButtonBlock)


def test_document_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        Document.model_validate({"blocks": [{"kind": "video", "id": "v"}]})


def test_document_rejects_duplicate_ids():
    with pytest.raises(ValidationError):
        Document(blocks=[DividerBlock(id="x"), TextBlock(id="x", content="a")])


def test_document_lookup_helpers():
    doc = Document(blocks=[DividerBlock(id="a"), TextBlock(id="b", content="x")])
    assert doc.ids() == ["a", "b"]
    assert doc.index_of("b") == 1
    assert doc.index_of("zz") == -1
    assert doc.find("b").content == "x"
    assert doc.find("zz") is None
    assert not doc.is_empty()
    assert Document().is_empty()


# ── IdGenerator ──────────────────────────────────────────────────────────────

def test_id_generator_unique_with_frozen_clock():
    ids = IdGenerator(clock=lambda: 1.0)
    assert ids.next("text") == "text-1000-0"
    assert ids.next("text") == "text-1000-1"
    assert ids.next("image") == "image-1000-2"


def test_id_generator_many_ids_distinct():
    ids = IdGenerator()
    generated = [ids.next("divider") for _ in range(500)]
    assert len(set(generated)) == 500


# ── Fabrique ─────────────────────────────────────────────────────────────────

def test_new_text_block_localized():
    b = new_block("text", IdGenerator(), lang="pt")
    assert b.content == "Novo texto"
    assert (b.font_size, b.color, b.font_weight) == ("16px", "#000000", "normal")


def test_new_button_block_defaults():
    b = new_block("button", IdGenerator(), lang="en")
    assert b.text == "Click here"
    assert b.url == ""
    assert b.background_color == "#1976D2"
    assert b.color == "#FFFFFF"


def test_new_image_and_divider():
    ids = IdGenerator()
    img = new_block("image", ids)
    div = new_block("divider", ids)
    assert (img.src, img.alt, img.width) == ("", "", None)
    assert div.kind == "divider"
    assert img.id != div.id


def test_new_block_unknown_kind():
    with pytest.raises(ValueError, match="video"):
        new_block("video", IdGenerator())


def test_new_reset_button():
    b = new_reset_button(IdGenerator(), lang="pt")
    assert b.text == "Redefinir Senha"
    assert b.url == "{{url_reset}}"
    assert b.id.startswith("button-reset-")
    assert b.background_color == "#000000"
