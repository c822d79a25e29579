"""Dice argument validation and evaluation."""

from typing import List, Sequence

from dicegame.constants import DICE_PATTERN, MIN_DICE
from dicegame.errors import ConfigurationError
from dicegame.models.dice import Dice


def dice_sum(faces: Sequence[int]) -> int:
    """Sum the faces of a dice.

    Raises:
        ValueError: If ``faces`` is empty
    """
    if not faces:
        raise ValueError("Cannot sum a dice without faces.")
    return sum(faces)


def parse_dice(value: str) -> Dice:
    """Parse one ``1,2,3``-style definition.

    Raises:
        ConfigurationError: If the text is not a comma-separated list of non-negative integers
    """
    if not isinstance(value, str) or not DICE_PATTERN.fullmatch(value):
        raise ConfigurationError(
            f"Invalid dice configuration {value!r}. Please use comma-separated integers."
        )
    return Dice(tuple(int(face) for face in value.split(",")))


def validate_dice_arguments(args: Sequence[str]) -> List[Dice]:
    """Turn raw command line arguments into dice.

    Args:
        args: One definition per argument

    Returns:
        The dice, in argument order

    Raises:
        ConfigurationError: If fewer than three dice are given or one is malformed
    """
    if len(args) < MIN_DICE:
        raise ConfigurationError(f"Please provide at least {MIN_DICE} dice configurations.")
    return [parse_dice(arg) for arg in args]
