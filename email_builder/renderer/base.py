"""
Protocol Renderer — interface pluggable pour les renderers (HTML email…).
"""
from typing import Protocol, runtime_checkable
from ..core.schemas import Document
from ..blocks.base import BaseBlock


@runtime_checkable
class Renderer(Protocol):
    def generate(self, doc: Document) -> str: ...
    def render_block(self, block: BaseBlock) -> str: ...
