"""Bloc Text — paragraphe avec taille, couleur et graisse optionnelles."""
from typing import Literal, Optional
from .base import BaseBlock

DEFAULT_FONT_SIZE   = "16px"
DEFAULT_TEXT_COLOR  = "#000"
DEFAULT_FONT_WEIGHT = "normal"


class TextBlock(BaseBlock):
    kind: Literal["text"] = "text"
    content: str = ""
    font_size: Optional[str] = None
    color: Optional[str] = None
    font_weight: Optional[str] = None
