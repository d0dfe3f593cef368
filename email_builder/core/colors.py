"""
Normalisation des styles pour le dialogue d'édition.
Couleurs → #RRGGBB majuscule, tailles de police → (nombre, unité).
"""
import re
from typing import Optional, Tuple

FONT_SIZE_UNITS = ["px", "rem", "em", "pt", "%"]

FONT_WEIGHT_OPTIONS = [
    ("100", "100 (Thin)"),
    ("200", "200 (Extra Light)"),
    ("300", "300 (Light)"),
    ("400", "400 (Normal)"),
    ("normal", "Normal"),
    ("500", "500 (Medium)"),
    ("600", "600 (Semi Bold)"),
    ("700", "700 (Bold)"),
    ("bold", "Bold"),
    ("800", "800 (Extra Bold)"),
    ("900", "900 (Black)"),
    ("bolder", "Bolder"),
    ("lighter", "Lighter"),
]

FALLBACK_COLOR = "#000000"

NAMED_COLORS = {
    "black":   "#000000",
    "white":   "#FFFFFF",
    "red":     "#FF0000",
    "green":   "#008000",
    "blue":    "#0000FF",
    "yellow":  "#FFFF00",
    "cyan":    "#00FFFF",
    "magenta": "#FF00FF",
    "silver":  "#C0C0C0",
    "gray":    "#808080",
    "grey":    "#808080",
    "maroon":  "#800000",
    "olive":   "#808000",
    "lime":    "#00FF00",
    "aqua":    "#00FFFF",
    "teal":    "#008080",
    "navy":    "#000080",
    "fuchsia": "#FF00FF",
    "purple":  "#800080",
}

_HEX_RE       = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
_RGB_RE       = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*[\d.]+)?\)")
_FONT_SIZE_RE = re.compile(r"^(\d+(?:\.\d+)?)(px|rem|em|pt|%)$")


def normalize_color_to_hex(color: Optional[str]) -> str:
    """
    Convertit une couleur CSS en #RRGGBB majuscule.

    "#fff" → "#FFFFFF", "navy" → "#000080", "rgb(25, 118, 210)" → "#1976D2".
    Toute valeur non reconnue (ou vide) retombe sur #000000.
    """
    if not color:
        return FALLBACK_COLOR

    if _HEX_RE.match(color):
        if len(color) == 4:
            return "#" + "".join(c * 2 for c in color[1:]).upper()
        return color.upper()

    named = NAMED_COLORS.get(color.lower().strip())
    if named:
        return named

    m = _RGB_RE.search(color)
    if m:
        r, g, b = (min(255, int(v)) for v in m.groups())
        return f"#{r:02X}{g:02X}{b:02X}"

    return FALLBACK_COLOR


def split_font_size(value: Optional[str]) -> Tuple[str, str]:
    """"1.5rem" → ("1.5", "rem"). Valeur illisible → ("16", "px")."""
    m = _FONT_SIZE_RE.match(value or "")
    if not m:
        return "16", "px"
    return m.group(1), m.group(2)
