"""
Fabrique de blocs — valeurs par défaut de la palette de l'éditeur.
"""
from typing import Optional

from ..blocks import BLOCK_REGISTRY, BaseBlock, ButtonBlock, DividerBlock, ImageBlock, TextBlock
from .i18n import i18n_resolve
from .ids import IdGenerator
from .variables import RESET_URL_VARIABLE


def new_block(kind: str, ids: IdGenerator, lang: Optional[str] = None) -> BaseBlock:
    """Crée un bloc du type demandé avec ses valeurs par défaut et un id frais."""
    if kind == "text":
        return TextBlock(
            id=ids.next("text"),
            content=i18n_resolve("@blocks.text.default", lang),
            color="#000000",
            font_size="16px",
            font_weight="normal",
        )
    if kind == "image":
        return ImageBlock(id=ids.next("image"), src="", alt="")
    if kind == "button":
        return ButtonBlock(
            id=ids.next("button"),
            text=i18n_resolve("@blocks.button.default", lang),
            url="",
            background_color="#1976D2",
            color="#FFFFFF",
        )
    if kind == "divider":
        return DividerBlock(id=ids.next("divider"))
    raise ValueError(f"Bloc inconnu : {kind!r}. Registry : {list(BLOCK_REGISTRY)}")


def new_reset_button(ids: IdGenerator, lang: Optional[str] = None) -> ButtonBlock:
    """Bouton de reset de mot de passe, pointant vers la variable {{url_reset}}."""
    return ButtonBlock(
        id=ids.next("button-reset"),
        text=i18n_resolve("@blocks.reset_password.default", lang),
        url=RESET_URL_VARIABLE,
        background_color="#000000",
        color="#FFFFFF",
    )
