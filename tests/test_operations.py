"""Tests opérations pures — insert, update, delete, move (propriétés de liste)."""
import random

import pytest
from pydantic import ValidationError

from email_builder.blocks import TextBlock, ButtonBlock, DividerBlock
from email_builder.core.schemas import Document
from email_builder.editor.operations import append_block, update_by_id, delete_by_id, move_by_id


def make_doc(*ids: str) -> Document:
    return Document(blocks=[TextBlock(id=i, content=f"bloc {i}") for i in ids])


# ── append ───────────────────────────────────────────────────────────────────

def test_append_returns_new_document():
    doc = make_doc("a")
    new = append_block(doc, DividerBlock(id="b"))
    assert new.ids() == ["a", "b"]
    assert doc.ids() == ["a"]


def test_append_duplicate_id_rejected():
    with pytest.raises(ValidationError):
        append_block(make_doc("a"), DividerBlock(id="a"))


# ── update ───────────────────────────────────────────────────────────────────

def test_update_merges_patch():
    doc = Document(blocks=[ButtonBlock(id="b", text="Ir", url="")])
    new = update_by_id(doc, "b", {"url": "https://x", "color": "#FFFFFF"})
    b = new.find("b")
    assert (b.text, b.url, b.color) == ("Ir", "https://x", "#FFFFFF")
    assert doc.find("b").url == ""


def test_update_never_changes_id_or_kind():
    doc = make_doc("a")
    new = update_by_id(doc, "a", {"id": "zz", "kind": "divider", "content": "novo"})
    assert new.ids() == ["a"]
    assert new.blocks[0].kind == "text"
    assert new.blocks[0].content == "novo"


def test_update_missing_id_is_noop():
    doc = make_doc("a", "b")
    assert update_by_id(doc, "zz", {"content": "x"}) is doc


def test_update_invalid_patch_leaves_document():
    doc = make_doc("a")
    with pytest.raises(ValidationError):
        update_by_id(doc, "a", {"caption": "inconnu"})
    assert doc.blocks[0].content == "bloc a"


# ── delete ───────────────────────────────────────────────────────────────────

def test_delete_is_precise():
    doc = make_doc("a", "b", "c")
    new = delete_by_id(doc, "b")
    assert new.ids() == ["a", "c"]
    assert len(new.blocks) == len(doc.blocks) - 1


def test_delete_missing_id_unchanged():
    doc = make_doc("a", "b")
    new = delete_by_id(doc, "zz")
    assert new == doc
    assert new.ids() == ["a", "b"]


# ── move ─────────────────────────────────────────────────────────────────────

class TestMove:
    def test_move_down(self):
        assert move_by_id(make_doc("a", "b", "c", "d"), "a", "c").ids() == ["b", "c", "a", "d"]

    def test_move_up(self):
        assert move_by_id(make_doc("a", "b", "c", "d"), "d", "b").ids() == ["a", "d", "b", "c"]

    def test_adjacent_swap(self):
        assert move_by_id(make_doc("a", "b"), "a", "b").ids() == ["b", "a"]

    def test_same_id_noop(self):
        doc = make_doc("a", "b")
        assert move_by_id(doc, "a", "a") is doc

    def test_missing_ids_noop(self):
        doc = make_doc("a", "b")
        assert move_by_id(doc, "zz", "a") is doc
        assert move_by_id(doc, "a", "zz") is doc

    def test_move_is_permutation(self):
        rng = random.Random(42)
        ids = [f"id{i}" for i in range(8)]
        doc = make_doc(*ids)
        for _ in range(50):
            source, target = rng.choice(ids), rng.choice(ids)
            target_index = doc.index_of(target)
            new = move_by_id(doc, source, target)
            assert sorted(new.ids()) == sorted(doc.ids())
            if source != target:
                assert new.index_of(source) == target_index
            doc = new
