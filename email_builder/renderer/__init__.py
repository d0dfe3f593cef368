"""Renderers email_builder."""
from .html import generate, render_block, HtmlRenderer
from .base import Renderer

__all__ = ["generate", "render_block", "HtmlRenderer", "Renderer"]
