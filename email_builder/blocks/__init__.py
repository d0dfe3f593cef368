"""
Blocs email — exports publics + BlockUnion discriminé.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock
from .text import TextBlock, DEFAULT_FONT_SIZE, DEFAULT_TEXT_COLOR, DEFAULT_FONT_WEIGHT
from .image import ImageBlock, DEFAULT_IMAGE_WIDTH
from .button import ButtonBlock, DEFAULT_BUTTON_BACKGROUND, DEFAULT_BUTTON_COLOR
from .divider import DividerBlock

# Union discriminée par kind — utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        TextBlock,
        ImageBlock,
        ButtonBlock,
        DividerBlock,
    ],
    Field(discriminator="kind"),
]

BLOCK_REGISTRY: dict = {
    "text":    TextBlock,
    "image":   ImageBlock,
    "button":  ButtonBlock,
    "divider": DividerBlock,
}

__all__ = [
    # Base
    "BaseBlock",
    # Blocs
    "TextBlock", "ImageBlock", "ButtonBlock", "DividerBlock",
    # Défauts de génération
    "DEFAULT_FONT_SIZE", "DEFAULT_TEXT_COLOR", "DEFAULT_FONT_WEIGHT",
    "DEFAULT_IMAGE_WIDTH",
    "DEFAULT_BUTTON_BACKGROUND", "DEFAULT_BUTTON_COLOR",
    # Union + registry
    "BlockUnion", "BLOCK_REGISTRY",
]
