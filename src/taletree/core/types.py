"""Shared type aliases for the core and domain layers."""
from typing import Literal

Victor = Literal["hero", "enemy"]

__all__ = ["Victor"]
