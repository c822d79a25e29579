"""Constants and type definitions for the fair dice game."""

import re
from typing import Literal

# Type definitions
Party = Literal["USER", "COMPUTER"]
Winner = Literal["USER", "COMPUTER", "TIE"]
GameStateName = Literal["AWAITING_GUESS", "AWAITING_DICE_CHOICE", "RESOLVED", "EXITED"]

# Commit-reveal protocol
HMAC_ALGORITHM = "sha3_256"
HMAC_ALGORITHM_NAME = "HMAC-SHA3-256"
MIN_KEY_BYTES = 32  # 256 bits

# Logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Dice configuration
MIN_DICE = 3
DICE_PATTERN = re.compile(r"[0-9]+(,[0-9]+)*")

# Menu tokens
EXIT_INPUT = "X"
HELP_INPUT = "?"
