"""
Contrôleur d'édition — une instance par session d'édition d'un email.

Cycle de vie :
  open(initial_html?) → [insert | update_by_id | delete_by_id | move_by_drag]* → save() | cancel()

Le Document appartient exclusivement au contrôleur ; toute mutation passe par
les opérations pures de editor.operations et rafraîchit preview_html.
"""
import logging
from typing import Any, Callable, Dict, Optional

from ..blocks import BaseBlock, ButtonBlock, TextBlock
from ..blocks import DEFAULT_FONT_SIZE, DEFAULT_FONT_WEIGHT, DEFAULT_BUTTON_BACKGROUND
from ..core.colors import normalize_color_to_hex
from ..core.factory import new_block, new_reset_button
from ..core.ids import IdGenerator
from ..core.schemas import Document
from ..parser.html import parse
from ..renderer.base import Renderer
from ..renderer.html import HtmlRenderer
from . import operations as ops

log = logging.getLogger(__name__)


class EditorClosedError(RuntimeError):
    """Mutation demandée alors qu'aucune session n'est ouverte."""


class DragState:
    """Geste de glisser : idle → dragging(source_id) → idle. Aucune mutation en cours de geste."""

    def __init__(self):
        self.source_id: Optional[str] = None
        self.over_id: Optional[str] = None

    @property
    def active(self) -> bool:
        return self.source_id is not None

    def reset(self) -> None:
        self.source_id = None
        self.over_id = None


class EmailEditor:
    """
    Contrôleur d'édition/réordonnancement.

    Usage:
        >>> editor = EmailEditor(on_save=store_html)
        >>> editor.open(campaign.html)
        >>> block = editor.insert("button")
        >>> editor.update_by_id(block.id, {"url": "https://shop"})
        >>> html = editor.save()
    """

    def __init__(
        self,
        on_save: Optional[Callable[[str], Any]] = None,
        renderer: Optional[Renderer] = None,
        lang: Optional[str] = None,
    ):
        self.on_save = on_save
        self.renderer = renderer or HtmlRenderer()
        self.lang = lang
        self.is_open = False
        self.drag = DragState()
        self._ids = IdGenerator()
        self._document = Document()
        self._preview_for: Optional[Document] = None
        self._preview_html = ""

    # ── Session ──────────────────────────────────────────────────────────────

    def open(self, initial_html: Optional[str] = None) -> Document:
        """Ouvre une session ; le Document est amorcé depuis le HTML s'il n'est pas vide."""
        self._reset()
        self.is_open = True
        if initial_html and initial_html.strip():
            self._document = parse(initial_html, self._ids)
        log.info("Session email ouverte — %d blocs", len(self._document.blocks))
        return self._document

    def save(self) -> str:
        """Émet le HTML final vers l'appelant puis ferme la session."""
        self._require_open()
        html = self.renderer.generate(self._document)
        if self.on_save is not None:
            self.on_save(html)
        log.info("Session email enregistrée — %d blocs", len(self._document.blocks))
        self._reset()
        return html

    def cancel(self) -> None:
        """Ferme la session sans rien émettre."""
        self._reset()

    def _reset(self) -> None:
        self.is_open = False
        self.drag.reset()
        self._ids = IdGenerator()
        self._document = Document()
        self._preview_for = None
        self._preview_html = ""

    def _require_open(self) -> None:
        if not self.is_open:
            raise EditorClosedError("Aucune session d'édition ouverte")

    # ── Lecture ──────────────────────────────────────────────────────────────

    @property
    def document(self) -> Document:
        return self._document

    @property
    def preview_html(self) -> str:
        """Projection generate(document), recalculée à chaque changement."""
        if self._preview_for is not self._document:
            self._preview_html = self.renderer.generate(self._document)
            self._preview_for = self._document
        return self._preview_html

    def edit_copy(self, block_id: str) -> Optional[BaseBlock]:
        """Copie du bloc prête pour le dialogue d'édition (couleurs en #RRGGBB)."""
        block = self._document.find(block_id)
        if isinstance(block, ButtonBlock):
            return block.model_copy(update={
                "background_color": normalize_color_to_hex(block.background_color or DEFAULT_BUTTON_BACKGROUND),
                "color": normalize_color_to_hex(block.color or "#FFFFFF"),
            })
        if isinstance(block, TextBlock):
            return block.model_copy(update={
                "color": normalize_color_to_hex(block.color or "#000000"),
                "font_size": block.font_size or DEFAULT_FONT_SIZE,
                "font_weight": block.font_weight or DEFAULT_FONT_WEIGHT,
            })
        return block.model_copy() if block is not None else None

    # ── Mutations ────────────────────────────────────────────────────────────

    def insert(self, kind: str) -> BaseBlock:
        self._require_open()
        block = new_block(kind, self._ids, self.lang)
        self._document = ops.append_block(self._document, block)
        return block

    def insert_reset_button(self) -> BaseBlock:
        self._require_open()
        block = new_reset_button(self._ids, self.lang)
        self._document = ops.append_block(self._document, block)
        return block

    def update_by_id(self, block_id: str, patch: Dict[str, Any]) -> Document:
        self._require_open()
        self._document = ops.update_by_id(self._document, block_id, patch)
        return self._document

    def delete_by_id(self, block_id: str) -> Document:
        self._require_open()
        self._document = ops.delete_by_id(self._document, block_id)
        return self._document

    def move_by_drag(self, source_id: str, target_id: str) -> Document:
        self._require_open()
        self._document = ops.move_by_id(self._document, source_id, target_id)
        return self._document

    # ── Geste de glisser ─────────────────────────────────────────────────────

    def start_drag(self, source_id: str) -> None:
        self._require_open()
        if self._document.index_of(source_id) < 0:
            return
        self.drag.reset()
        self.drag.source_id = source_id

    def drag_over(self, target_id: Optional[str]) -> None:
        if self.drag.active:
            self.drag.over_id = target_id

    def end_drag(self, target_id: Optional[str] = None) -> Document:
        """Fin du geste : le déplacement est appliqué ici, et seulement ici."""
        if not self.drag.active:
            return self._document
        source_id = self.drag.source_id
        target = target_id if target_id is not None else self.drag.over_id
        self.drag.reset()
        if target is None:
            return self._document
        return self.move_by_drag(source_id, target)

    def cancel_drag(self) -> None:
        self.drag.reset()
