"""
Schémas Pydantic pour email_builder.
Structure : Document → liste ordonnée de blocs (Text, Image, Button, Divider)

L'ordre des blocs est à la fois l'ordre visuel et l'ordre de sérialisation.
"""
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from ..blocks import BlockUnion


class Document(BaseModel):
    """Corps d'un email : séquence ordonnée de blocs, ids uniques."""
    blocks: List[BlockUnion] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "Document":
        seen = set()
        for block in self.blocks:
            if block.id in seen:
                raise ValueError(f"id de bloc dupliqué : {block.id!r}")
            seen.add(block.id)
        return self

    def ids(self) -> List[str]:
        return [b.id for b in self.blocks]

    def kinds(self) -> List[str]:
        return [b.kind for b in self.blocks]

    def index_of(self, block_id: str) -> int:
        """Position du bloc, -1 si absent."""
        for i, block in enumerate(self.blocks):
            if block.id == block_id:
                return i
        return -1

    def find(self, block_id: str) -> Optional[BlockUnion]:
        i = self.index_of(block_id)
        return self.blocks[i] if i >= 0 else None

    def is_empty(self) -> bool:
        return not self.blocks
