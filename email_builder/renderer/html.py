"""
Renderer HTML email — génère le HTML canonique d'un Document.

Chaque type de bloc produit toujours le même fragment (mêmes attributs, mêmes
enfants) : c'est ce qui rend la grammaire de reconnaissance du parser tenable.
"""
from html import escape
from typing import Any, Iterable, Union

from ..blocks import (
    TextBlock, ImageBlock, ButtonBlock, DividerBlock,
    DEFAULT_FONT_SIZE, DEFAULT_TEXT_COLOR, DEFAULT_FONT_WEIGHT,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_BUTTON_BACKGROUND, DEFAULT_BUTTON_COLOR,
)
from ..core.schemas import Document

CONTAINER_OPEN  = '<div style="max-width: 600px; margin: 0 auto; padding: 20px; font-family: Arial, sans-serif;">'
CONTAINER_CLOSE = "</div>"
DIVIDER_HTML    = '<hr style="border: none; border-top: 1px solid #e0e0e0; margin: 20px 0;" />'


def _attr(value: str) -> str:
    return escape(value or "", quote=True)


def _text(value: str) -> str:
    return escape(value or "", quote=False)


# ── Point d'entrée public ───────────────────────────────────────────────────

def generate(doc: Union[Document, Iterable[Any]]) -> str:
    """Génère le HTML complet d'un email (conteneur racine + un fragment par bloc)."""
    blocks = doc.blocks if isinstance(doc, Document) else list(doc)
    body = "".join(render_block(b) for b in blocks)
    return f"{CONTAINER_OPEN}{body}{CONTAINER_CLOSE}"


# ── Dispatch bloc ────────────────────────────────────────────────────────────

def render_block(block: Any) -> str:
    """Dispatch vers le renderer approprié."""
    if isinstance(block, TextBlock):    return render_text_block(block)
    if isinstance(block, ImageBlock):   return render_image_block(block)
    if isinstance(block, ButtonBlock):  return render_button_block(block)
    if isinstance(block, DividerBlock): return render_divider_block(block)

    return f"<!-- Bloc non implémenté : {getattr(block, 'kind', '?')} -->"


# ── Renderers blocs ──────────────────────────────────────────────────────────

def render_text_block(b: TextBlock) -> str:
    style = (
        f"font-size: {b.font_size or DEFAULT_FONT_SIZE}; "
        f"color: {b.color or DEFAULT_TEXT_COLOR}; "
        f"font-weight: {b.font_weight or DEFAULT_FONT_WEIGHT}; "
        "margin: 10px 0;"
    )
    return f'<p style="{_attr(style)}">{_text(b.content)}</p>'


def render_image_block(b: ImageBlock) -> str:
    style = f"max-width: {b.width or DEFAULT_IMAGE_WIDTH}; height: auto; display: block; margin: 0 auto;"
    return (
        '<div style="text-align: center; margin: 20px 0;">'
        f'<img src="{_attr(b.src)}" alt="{_attr(b.alt)}" style="{_attr(style)}" />'
        "</div>"
    )


def render_button_block(b: ButtonBlock) -> str:
    style = (
        "display: inline-block; padding: 12px 24px; "
        f"background-color: {b.background_color or DEFAULT_BUTTON_BACKGROUND}; "
        f"color: {b.color or DEFAULT_BUTTON_COLOR}; "
        "text-decoration: none; border-radius: 4px;"
    )
    return (
        '<div style="margin: 20px 0; text-align: center;">'
        f'<a href="{_attr(b.url)}" style="{_attr(style)}">{_text(b.text)}</a>'
        "</div>"
    )


def render_divider_block(b: DividerBlock) -> str:
    return DIVIDER_HTML


class HtmlRenderer:
    """Renderer HTML email (implémente le protocol Renderer)."""

    def generate(self, doc: Document) -> str:
        return generate(doc)

    def render_block(self, block: Any) -> str:
        return render_block(block)
