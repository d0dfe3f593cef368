"""Bloc Button — lien stylé en pilule. L'URL peut être vide, le libellé porte le bouton."""
from typing import Literal, Optional
from .base import BaseBlock

DEFAULT_BUTTON_BACKGROUND = "#1976d2"
DEFAULT_BUTTON_COLOR      = "#fff"


class ButtonBlock(BaseBlock):
    kind: Literal["button"] = "button"
    text: str = ""
    url: str = ""
    background_color: Optional[str] = None
    color: Optional[str] = None
