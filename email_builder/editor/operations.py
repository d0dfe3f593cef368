"""
Opérations pures sur un Document : (Document, args) → nouveau Document.
L'entrée n'est jamais modifiée ; un id absent laisse le Document inchangé.
"""
import logging
from typing import Any, Dict

from ..blocks import BLOCK_REGISTRY, BaseBlock
from ..core.schemas import Document

log = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = ("id", "kind")


def append_block(doc: Document, block: BaseBlock) -> Document:
    return Document(blocks=[*doc.blocks, block])


def update_by_id(doc: Document, block_id: str, patch: Dict[str, Any]) -> Document:
    """
    Fusionne `patch` dans le bloc ciblé, revalidé par son propre modèle.
    id et kind ne sont jamais modifiés. Un patch invalide lève ValidationError.
    """
    i = doc.index_of(block_id)
    if i < 0:
        log.debug("update ignoré : bloc %s absent", block_id)
        return doc

    current = doc.blocks[i]
    fields = {k: v for k, v in (patch or {}).items() if k not in _IMMUTABLE_FIELDS}
    block_cls = BLOCK_REGISTRY[current.kind]
    updated = block_cls.model_validate({**current.model_dump(), **fields})

    blocks = list(doc.blocks)
    blocks[i] = updated
    return Document(blocks=blocks)


def delete_by_id(doc: Document, block_id: str) -> Document:
    i = doc.index_of(block_id)
    if i < 0:
        log.debug("delete ignoré : bloc %s absent", block_id)
        return doc
    return Document(blocks=doc.blocks[:i] + doc.blocks[i + 1:])


def move_by_id(doc: Document, source_id: str, target_id: str) -> Document:
    """
    Déplace la source à l'ancienne position de la cible (retrait puis insertion),
    les blocs intermédiaires glissent d'un cran.
    """
    if source_id == target_id:
        return doc
    old_index = doc.index_of(source_id)
    new_index = doc.index_of(target_id)
    if old_index < 0 or new_index < 0:
        log.debug("move ignoré : %s → %s", source_id, target_id)
        return doc

    blocks = list(doc.blocks)
    blocks.insert(new_index, blocks.pop(old_index))
    return Document(blocks=blocks)
