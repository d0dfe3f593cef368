"""Parser HTML → Document."""
from .html import parse
from .styles import extract_style_value, extract_text_color, is_centered

__all__ = ["parse", "extract_style_value", "extract_text_color", "is_centered"]
