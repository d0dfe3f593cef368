"""
EMAIL_BUILDER — éditeur structuré de contenu email.

Aller-retour sans perte entre une liste ordonnée de blocs typés
(Text, Image, Button, Divider) et le HTML canonique stocké côté serveur.

Usage (direct):
    >>> from email_builder import Document, TextBlock, generate, parse
    >>> html = generate(Document(blocks=[TextBlock(id="t1", content="Olá")]))
    >>> parse(html).kinds()
    ['text']

Usage (session d'édition):
    >>> from email_builder import EmailEditor
    >>> editor = EmailEditor(on_save=store_html)
    >>> editor.open(campaign_html)
    >>> editor.insert("divider")
    >>> editor.save()
"""

__version__ = "0.1.0"

# ── Blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, TextBlock, ImageBlock, ButtonBlock, DividerBlock,
    BlockUnion, BLOCK_REGISTRY,
)

# ── Modèle ───────────────────────────────────────────────────────────────────
from .core.schemas import Document
from .core.ids import IdGenerator
from .core.factory import new_block, new_reset_button

# ── Génération / parsing ─────────────────────────────────────────────────────
from .renderer.html import generate, render_block, HtmlRenderer
from .parser.html import parse

# ── Édition ──────────────────────────────────────────────────────────────────
from .editor.controller import EmailEditor, EditorClosedError

__all__ = [
    # blocs
    "BaseBlock", "TextBlock", "ImageBlock", "ButtonBlock", "DividerBlock",
    "BlockUnion", "BLOCK_REGISTRY",
    # modèle
    "Document", "IdGenerator", "new_block", "new_reset_button",
    # génération / parsing
    "generate", "render_block", "HtmlRenderer", "parse",
    # édition
    "EmailEditor", "EditorClosedError",
]
