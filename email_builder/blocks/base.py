"""
Blocs de base pour email_builder.
Chaque bloc est discriminé par `kind` et porte un `id` opaque unique dans le document.
"""
from pydantic import BaseModel, ConfigDict


class BaseBlock(BaseModel):
    """Bloc de base (classe parente des quatre blocs email)."""
    model_config = ConfigDict(extra="forbid")

    kind: str
    id: str
