"""
Parser HTML → Document.

Grammaire reconnue (sous-ensemble produit par renderer.html) :
  <div style="max-width…">                 conteneur racine
  <p>                                      → TextBlock
  <div style="text-align:center"><img>     → ImageBlock
  <div><a>                                 → ButtonBlock
  <hr>                                     → DividerBlock
Tout le reste est traversé (nœuds conteneurs) ou ignoré (feuilles inconnues).
Arbre construit par html5lib : fermetures implicites HTML5, comme un navigateur.
Ne lève jamais : en cas d'échec, Document vide.
"""
import logging
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from ..blocks import (
    TextBlock, ImageBlock, ButtonBlock, DividerBlock,
    DEFAULT_FONT_SIZE, DEFAULT_TEXT_COLOR, DEFAULT_FONT_WEIGHT,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_BUTTON_BACKGROUND, DEFAULT_BUTTON_COLOR,
)
from ..core.ids import IdGenerator
from ..core.schemas import Document
from .styles import extract_style_value, extract_text_color, is_centered

log = logging.getLogger(__name__)


# ── Point d'entrée public ───────────────────────────────────────────────────

def parse(html: Optional[str], ids: Optional[IdGenerator] = None) -> Document:
    """
    Convertit un HTML (généré ou étranger) en Document.

    1. Localise le conteneur racine (div max-width → première div → body)
    2. Parcourt ses enfants dans l'ordre du document
    3. Applique les règles de reconnaissance, blocs à plat dans l'ordre
    """
    if not html or not html.strip():
        return Document()

    ids = ids or IdGenerator()
    try:
        soup = BeautifulSoup(html, "html5lib")
        container = _find_container(soup)
        walker = _Walker(container, ids)
        for child in list(container.children):
            walker.visit(child)
        return Document(blocks=walker.blocks)
    except Exception as e:
        log.warning("Erreur au parsing HTML : %s", e)
        return Document()


def _find_container(soup: BeautifulSoup) -> Tag:
    container = soup.find("div", style=lambda s: bool(s) and "max-width" in s)
    if container is None:
        container = soup.find("div")
    if container is None:
        container = soup.body or soup
    return container


# ── Parcours ─────────────────────────────────────────────────────────────────

class _Walker:
    """Accumule les blocs reconnus pendant le parcours d'un conteneur."""

    def __init__(self, container: Tag, ids: IdGenerator):
        self.container = container
        self.ids = ids
        self.blocks: List = []

    def visit_children(self, node: Tag) -> None:
        for child in list(node.children):
            self.visit(child)

    def visit(self, node) -> None:
        if isinstance(node, Tag):
            self.visit_tag(node)
        elif type(node) is NavigableString:
            # Commentaires, doctype, CDATA, script/style : sous-classes ignorées
            text = str(node).strip()
            if text:
                self.blocks.append(TextBlock(id=self.ids.next("text"), content=text))

    def visit_tag(self, el: Tag) -> None:
        name = (el.name or "").lower()

        if name == "div" and el is self.container:
            self.visit_children(el)
        elif name == "p":
            self.visit_paragraph(el)
        elif name == "img":
            self.visit_image(el)
        elif name == "div":
            self.visit_wrapper(el)
        elif name == "a":
            # Lien isolé : les boutons de l'éditeur sont toujours dans une div
            return
        elif name == "hr":
            self.blocks.append(DividerBlock(id=self.ids.next("divider")))
        else:
            self.visit_children(el)

    def visit_paragraph(self, el: Tag) -> None:
        content = el.get_text().strip()
        if not content:
            return
        style = el.get("style") or ""
        self.blocks.append(TextBlock(
            id=self.ids.next("text"),
            content=content,
            font_size=extract_style_value(style, "font-size") or DEFAULT_FONT_SIZE,
            color=extract_style_value(style, "color") or DEFAULT_TEXT_COLOR,
            font_weight=extract_style_value(style, "font-weight") or DEFAULT_FONT_WEIGHT,
        ))

    def visit_image(self, el: Tag) -> None:
        parent = el.parent
        if isinstance(parent, Tag) and parent.name == "div" and is_centered(parent.get("style")):
            # Traitée avec sa div centrée (règle wrapper), pas de double comptage
            return
        self.blocks.append(self._image_from(el))

    def visit_wrapper(self, el: Tag) -> None:
        # Ordre de priorité fixe : lien → image centrée → traversée
        link = el.find("a")
        if link is not None:
            button = self._button_from(link)
            if button is not None:
                self.blocks.append(button)
            return

        img = el.find("img")
        if img is not None and is_centered(el.get("style")):
            self.blocks.append(self._image_from(img))
            return

        self.visit_children(el)

    # ── Extraction ───────────────────────────────────────────────────────────

    def _image_from(self, img: Tag) -> ImageBlock:
        return ImageBlock(
            id=self.ids.next("image"),
            src=img.get("src") or "",
            alt=img.get("alt") or "",
            width=extract_style_value(img.get("style"), "max-width") or DEFAULT_IMAGE_WIDTH,
        )

    def _button_from(self, link: Tag) -> Optional[ButtonBlock]:
        text = link.get_text().strip()
        if not text:
            return None
        style = link.get("style") or ""
        return ButtonBlock(
            id=self.ids.next("button"),
            text=text,
            url=link.get("href") or "",
            background_color=extract_style_value(style, "background-color") or DEFAULT_BUTTON_BACKGROUND,
            color=extract_text_color(style) or DEFAULT_BUTTON_COLOR,
        )
