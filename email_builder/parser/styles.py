"""
Extraction de valeurs depuis un attribut style inline ("prop: valeur; ...").
"""
import re
from typing import Optional


def extract_style_value(style: Optional[str], prop: str) -> Optional[str]:
    """
    Valeur de la déclaration `prop` dans un style inline, None si absente.

    L'ancrage en début de déclaration empêche "color" de matcher dans
    "background-color". Les valeurs sans unité sont rendues telles quelles.
    """
    if not style:
        return None
    m = re.search(rf"(?:^|;)\s*{re.escape(prop)}\s*:\s*([^;]+)", style, re.IGNORECASE)
    if not m:
        return None
    value = m.group(1).strip()
    return value or None


def extract_text_color(style: Optional[str]) -> Optional[str]:
    """
    Couleur de texte d'un bouton : première déclaration commençant exactement
    par "color:" (jamais "background-color:"). Même précédence que le HTML
    déjà stocké côté serveur.
    """
    if not style:
        return None
    for part in (p.strip() for p in style.split(";")):
        if part.startswith("color:") and "background" not in part:
            return part[len("color:"):].strip() or None
    return None


def is_centered(style: Optional[str]) -> bool:
    return bool(style) and "text-align" in style and "center" in style
