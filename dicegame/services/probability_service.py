"""Win-probability estimator and help table for the dice menu.

A dice "beats" another when its face sum is strictly larger. Ties are not
wins, but every opponent still counts towards the denominator.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from tabulate import tabulate

from dicegame.models.dice import Dice


@dataclass(frozen=True)
class WinProbability:
    """How often one dice beats the others."""

    dice: Dice
    wins: int
    total_comparisons: int

    @property
    def percent(self) -> float:
        if self.total_comparisons == 0:
            return 0.0
        return self.wins / self.total_comparisons * 100


def calculate_win_probabilities(dice: Sequence[Dice]) -> List[WinProbability]:
    """Compare every dice against every other one by sum.

    Args:
        dice: The dice to compare

    Returns:
        One WinProbability per dice, in input order
    """
    sums = [d.total for d in dice]
    probabilities = []
    for index, current in enumerate(dice):
        wins = 0
        total_comparisons = 0
        for opponent_index, opponent_sum in enumerate(sums):
            if opponent_index == index:
                continue
            total_comparisons += 1
            if sums[index] > opponent_sum:
                wins += 1
        probabilities.append(WinProbability(current, wins, total_comparisons))
    return probabilities


def render_help_table(dice: Sequence[Dice], tablefmt: Optional[str] = None) -> str:
    """Render win probabilities as a text table for the ``?`` menu option."""
    if tablefmt is None:
        from dicegame.config import settings
        tablefmt = settings.help_table_format

    rows = [
        [p.dice.label, p.dice.total, f"{p.percent:.2f}%"]
        for p in calculate_win_probabilities(dice)
    ]
    table = tabulate(
        rows, headers=["Dice", "Sum", "Win probability"], tablefmt=tablefmt, disable_numparse=True
    )
    return "Win probabilities for each dice:\n" + table + "\n\nChoose your dice wisely!"
