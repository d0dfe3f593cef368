"""Bloc Divider — séparateur horizontal, sans configuration."""
from typing import Literal
from .base import BaseBlock


class DividerBlock(BaseBlock):
    kind: Literal["divider"] = "divider"
