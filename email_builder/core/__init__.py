"""Core module pour email_builder."""
from .schemas import Document
from .ids import IdGenerator
from .factory import new_block, new_reset_button
from .colors import normalize_color_to_hex, split_font_size, FONT_SIZE_UNITS, FONT_WEIGHT_OPTIONS
from .variables import CLIENT_VARIABLES, available_variables, insert_variable

__all__ = [
    "Document",
    "IdGenerator",
    "new_block",
    "new_reset_button",
    "normalize_color_to_hex",
    "split_font_size",
    "FONT_SIZE_UNITS",
    "FONT_WEIGHT_OPTIONS",
    "CLIENT_VARIABLES",
    "available_variables",
    "insert_variable",
]
