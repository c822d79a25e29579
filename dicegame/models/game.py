"""Game session state for one round of the fair dice game."""

from dataclasses import dataclass, field
from typing import List, Optional

from dicegame.constants import GameStateName, Party, Winner
from dicegame.errors import InvalidSelection
from dicegame.models.dice import Dice
from dicegame.utils.commit_reveal import Commitment, FirstMoveResolution


@dataclass
class GameSession:
    """Everything one round needs, passed explicitly through the controller.

    ``state`` moves AWAITING_GUESS -> AWAITING_DICE_CHOICE -> RESOLVED, and
    may jump to EXITED from either waiting state.
    """

    dice: List[Dice]
    available: List[Dice] = field(default_factory=list)
    state: GameStateName = "AWAITING_GUESS"
    commitment: Optional[Commitment] = None
    resolution: Optional[FirstMoveResolution] = None
    user_dice: Optional[Dice] = None
    computer_dice: Optional[Dice] = None
    winner: Optional[Winner] = None

    def __post_init__(self):
        if not self.available:
            self.available = list(self.dice)

    @property
    def first_mover(self) -> Optional[Party]:
        return self.resolution.first_mover if self.resolution else None

    @property
    def finished(self) -> bool:
        return self.state in ("RESOLVED", "EXITED")

    def take(self, index: int) -> Dice:
        """Remove and return the available dice at ``index``.

        Raises:
            InvalidSelection: If ``index`` is out of range; ``available`` is untouched
        """
        if not 0 <= index < len(self.available):
            raise InvalidSelection("Invalid dice choice.")
        return self.available.pop(index)

    def exit(self):
        """Cancel the round. The commitment stays undisclosed."""
        self.state = "EXITED"

    def settle(self) -> Winner:
        """Compare the chosen dice and finish the round."""
        user_sum = self.user_dice.total
        computer_sum = self.computer_dice.total
        if user_sum > computer_sum:
            self.winner = "USER"
        elif user_sum < computer_sum:
            self.winner = "COMPUTER"
        else:
            self.winner = "TIE"
        self.state = "RESOLVED"
        return self.winner
