"""Dice models for the fair dice game."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Dice:
    """One dice definition as given on the command line."""

    faces: Tuple[int, ...]

    def __post_init__(self):
        if not self.faces:
            raise ValueError("A dice must have at least one face.")
        if any(face < 0 for face in self.faces):
            raise ValueError("Dice faces must be non-negative integers.")

    @property
    def label(self) -> str:
        """Comma-separated faces, e.g. ``2,2,4,4,9,9``."""
        return ",".join(str(face) for face in self.faces)

    @property
    def total(self) -> int:
        return sum(self.faces)

    def __str__(self) -> str:
        return f"[{self.label}]"
