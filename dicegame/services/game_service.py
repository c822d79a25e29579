"""Game session service for the fair dice game.

This module runs one interactive round:
- Committing to a random bit and letting the user guess it
- Revealing the key so the user can check the commitment
- Letting each side pick a dice, first mover first
- Comparing sums and announcing the winner

Every prompt is a blocking read that re-prompts in place on bad input, so
dice already taken are never put back.
"""

import logging
import secrets
from typing import Callable, List, Optional

from dicegame.constants import EXIT_INPUT, HELP_INPUT
from dicegame.errors import InvalidSelection
from dicegame.models.dice import Dice
from dicegame.models.game import GameSession
from dicegame.services.probability_service import render_help_table
from dicegame.utils.commit_reveal import generate_commitment, resolve_first_move

logger = logging.getLogger(__name__)

SELECTION_PROMPT = "Your selection: "

RESULT_MESSAGES = {
    "USER": "User won!",
    "COMPUTER": "Computer won!",
    "TIE": "It's a tie!",
}


class GameController:
    """Drives a GameSession through its states using injected I/O.

    Args:
        dice: Validated dice definitions
        read: Blocking prompt reader, ``input`` by default
        write: Line writer, ``print`` by default
        choose: Returns a uniform index below its argument for the computer's pick
    """

    def __init__(
        self,
        dice: List[Dice],
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        choose: Callable[[int], int] = secrets.randbelow,
    ):
        self.session = GameSession(dice=list(dice))
        self.read = read or input
        self.write = write or print
        self.choose = choose

    def run(self) -> GameSession:
        """Play one round and return the finished session."""
        session = self.session

        if not self._determine_first_move(session):
            return self._stop(session)

        if session.first_mover == "USER":
            session.user_dice = self._user_pick(session)
            if session.user_dice is None:
                return self._stop(session)
            session.computer_dice = self._computer_pick(session)
            self.write(f"Computer chose: {session.computer_dice} (Sum: {session.computer_dice.total})")
        else:
            session.computer_dice = self._computer_pick(session)
            self.write(f"I chose {session.computer_dice} (Sum: {session.computer_dice.total})")
            self.write("Your turn. Choose your dice.")
            session.user_dice = self._user_pick(session)
            if session.user_dice is None:
                return self._stop(session)

        winner = session.settle()
        self.write(RESULT_MESSAGES[winner])
        logger.info("round resolved, winner=%s", winner)
        return session

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------
    def _determine_first_move(self, session: GameSession) -> bool:
        """AWAITING_GUESS. Returns False if the user exits."""
        self.write("Let's determine who makes the first move.")
        session.commitment = generate_commitment()
        # The digest goes out before any guess is read.
        self.write(
            f"I've selected a random number in the range 0..1 (HMAC: {session.commitment.digest})."
        )
        self.write("Try and guess my selection.")

        while True:
            self.write(f"0 - 0\n1 - 1\n{EXIT_INPUT} - exit\n{HELP_INPUT} - help")
            choice = self._prompt()
            if choice is None:
                return False
            if choice == HELP_INPUT:
                self.write(render_help_table(session.dice))
                continue
            try:
                session.resolution = resolve_first_move(session.commitment, self._parse_guess(choice))
            except InvalidSelection:
                self.write("Invalid input.")
                continue
            break

        resolution = session.resolution
        self.write(f"I chose {resolution.outcome} (KEY={resolution.key_hex})")
        if resolution.first_mover == "USER":
            self.write("You make the first move.")
        else:
            self.write("I make the first move.")
        session.state = "AWAITING_DICE_CHOICE"
        return True

    def _user_pick(self, session: GameSession) -> Optional[Dice]:
        """AWAITING_DICE_CHOICE for the user. Returns None if the user exits."""
        while True:
            self._print_dice_options(session.available)
            choice = self._prompt()
            if choice is None:
                return None
            if choice == HELP_INPUT:
                self.write(render_help_table(session.dice))
                continue
            try:
                if not choice.isdecimal():
                    raise InvalidSelection("Invalid dice choice.")
                dice = session.take(int(choice))
            except InvalidSelection as e:
                self.write(str(e))
                continue
            self.write(f"You chose: {dice} (Sum: {dice.total})")
            return dice

    def _computer_pick(self, session: GameSession) -> Dice:
        return session.take(self.choose(len(session.available)))

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------
    def _prompt(self) -> Optional[str]:
        """Read one selection; None means the user asked to exit."""
        try:
            choice = self.read(SELECTION_PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            return None
        if choice.upper() == EXIT_INPUT:
            return None
        return choice

    def _print_dice_options(self, dice: List[Dice]):
        for i, d in enumerate(dice):
            self.write(f"{i} - {d.label}")
        self.write(f"{EXIT_INPUT} - exit\n{HELP_INPUT} - help")

    @staticmethod
    def _parse_guess(choice: str) -> int:
        if choice not in ("0", "1"):
            raise InvalidSelection("Invalid input.")
        return int(choice)

    def _stop(self, session: GameSession) -> GameSession:
        session.exit()
        self.write("Game stopped.")
        logger.info("round exited by user")
        return session
