"""Error taxonomy for the fair dice game."""


class DiceGameError(Exception):
    """Base class for all game errors."""


class ConfigurationError(DiceGameError):
    """The dice arguments are missing or malformed. Aborts before the protocol starts."""


class InvalidSelection(DiceGameError):
    """A menu choice was non-numeric or out of range. The user is re-prompted."""


class RandomnessUnavailable(DiceGameError):
    """The secure entropy source failed. Fatal, there is no weaker fallback."""
