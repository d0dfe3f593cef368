"""
Libellés par défaut des blocs créés dans l'éditeur (catalogues i18n/*.json).

Une valeur "@blocks.text.default" est cherchée dans le catalogue de la langue,
toute autre valeur est rendue telle quelle. Langue par défaut :
EMAIL_BUILDER_LANG, sinon fr.
"""
import json
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

CATALOG_DIR = Path(__file__).resolve().parent.parent / "i18n"


def default_lang() -> str:
    return os.getenv("EMAIL_BUILDER_LANG", "fr")


@lru_cache(maxsize=None)
def _catalog(lang: str) -> dict:
    path = CATALOG_DIR / f"{lang}.json"
    if not path.is_file():
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


def i18n_resolve(value: str, lang: Optional[str] = None) -> str:
    """Libellé localisé, ou "[missing:clé]" si la clé ne mène pas à un texte."""
    if not value or value[0] != "@":
        return value

    key = value[1:]
    node = _catalog(lang or default_lang())
    for part in key.split("."):
        node = node.get(part) if isinstance(node, dict) else None
        if node is None:
            break

    if node is None or isinstance(node, dict):
        return f"[missing:{key}]"
    return str(node)


def available_langs() -> List[str]:
    return sorted(p.stem for p in CATALOG_DIR.glob("*.json"))


def reload_cache() -> None:
    _catalog.cache_clear()
