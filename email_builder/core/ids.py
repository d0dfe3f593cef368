"""
Générateur d'ids de blocs — un par session d'édition.

Format : "{kind}-{epoch_ms}-{n}". Le compteur garantit l'unicité même si
l'horloge n'avance pas entre deux créations ; aucun état global partagé.
"""
import itertools
import time
from typing import Callable, Optional


class IdGenerator:
    """
    Produit des ids uniques pour la durée d'une session.

    Usage:
        >>> ids = IdGenerator()
        >>> ids.next("text")
        'text-1760000000000-0'
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._counter = itertools.count()

    def next(self, kind: str) -> str:
        stamp = int(self._clock() * 1000)
        return f"{kind}-{stamp}-{next(self._counter)}"
