"""Bloc Image — image centrée, largeur max optionnelle."""
from typing import Literal, Optional
from .base import BaseBlock

DEFAULT_IMAGE_WIDTH = "100%"


class ImageBlock(BaseBlock):
    kind: Literal["image"] = "image"
    src: str = ""
    alt: str = ""
    width: Optional[str] = None
