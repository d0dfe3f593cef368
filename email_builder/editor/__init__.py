"""Édition / réordonnancement d'un Document."""
from .controller import EmailEditor, EditorClosedError, DragState
from .operations import append_block, update_by_id, delete_by_id, move_by_id
from .sessions import SessionStore

__all__ = [
    "EmailEditor", "EditorClosedError", "DragState",
    "append_block", "update_by_id", "delete_by_id", "move_by_id",
    "SessionStore",
]
