"""Cryptographic commit-reveal mechanism for a fair first-move decision."""

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from typing import Optional, Union

from dicegame.constants import HMAC_ALGORITHM, MIN_KEY_BYTES, Party
from dicegame.errors import InvalidSelection, RandomnessUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Commitment:
    """A committed bit: ``digest`` may be published, ``key`` and ``outcome`` stay secret until reveal."""

    key: bytes
    outcome: int
    digest: str

    @property
    def key_hex(self) -> str:
        return self.key.hex()

    def __repr__(self) -> str:
        # Keep the secret halves out of tracebacks and log lines.
        return f"Commitment(digest={self.digest!r})"


@dataclass(frozen=True)
class FirstMoveResolution:
    """Result of comparing the user's guess to the committed bit."""

    guess: int
    outcome: int
    first_mover: Party
    key: bytes

    @property
    def key_hex(self) -> str:
        return self.key.hex()

    @property
    def guessed_right(self) -> bool:
        return self.guess == self.outcome


def compute_digest(key: bytes, outcome: int) -> str:
    """
    Compute the keyed hash committing to an outcome.

    Args:
        key: Secret binding key
        outcome: The committed value, hashed as its decimal text

    Returns:
        Lowercase hex HMAC-SHA3-256 digest
    """
    return hmac.new(key, str(outcome).encode("utf-8"), getattr(hashlib, HMAC_ALGORITHM)).hexdigest()


def generate_commitment(key_bytes: Optional[int] = None) -> Commitment:
    """
    Draw a fresh key and a uniform bit, and commit to the bit.

    Args:
        key_bytes: Key length in bytes; defaults to ``settings.key_bytes``

    Returns:
        The Commitment record

    Raises:
        ValueError: If ``key_bytes`` gives less than 256 bits of key
        RandomnessUnavailable: If the OS entropy source fails
    """
    if key_bytes is None:
        from dicegame.config import settings
        key_bytes = settings.key_bytes
    if key_bytes < MIN_KEY_BYTES:
        raise ValueError(f"key must be at least {MIN_KEY_BYTES} bytes, got {key_bytes}")

    try:
        key = secrets.token_bytes(key_bytes)
        outcome = secrets.randbits(1)
    except (OSError, NotImplementedError) as e:
        logger.error("secure randomness source failed: %s", e)
        raise RandomnessUnavailable("secure randomness source is unavailable") from e

    commitment = Commitment(key=key, outcome=outcome, digest=compute_digest(key, outcome))
    logger.debug("created commitment %s", commitment.digest)
    return commitment


def _as_key_bytes(claimed_key: Union[bytes, str]) -> Optional[bytes]:
    if isinstance(claimed_key, (bytes, bytearray)):
        return bytes(claimed_key)
    if isinstance(claimed_key, str):
        try:
            return bytes.fromhex(claimed_key.strip())
        except ValueError:
            return None
    return None


def verify_digest(digest: str, claimed_key: Union[bytes, str], claimed_outcome: int) -> bool:
    """
    Check a published digest against a revealed key and outcome.

    Args:
        digest: Hex digest shown before the reveal
        claimed_key: Revealed key, raw bytes or hex text
        claimed_outcome: Revealed outcome

    Returns:
        True iff recomputing the keyed hash reproduces ``digest``
    """
    key = _as_key_bytes(claimed_key)
    if key is None or not isinstance(digest, str) or isinstance(claimed_outcome, bool):
        return False
    if not isinstance(claimed_outcome, int):
        return False
    expected = compute_digest(key, claimed_outcome)
    claimed = digest.strip().lower().encode("utf-8", "replace")
    return hmac.compare_digest(expected.encode("ascii"), claimed)


def verify(commitment: Commitment, claimed_key: Union[bytes, str], claimed_outcome: int) -> bool:
    """Return True iff ``(claimed_key, claimed_outcome)`` opens ``commitment``."""
    return verify_digest(commitment.digest, claimed_key, claimed_outcome)


def resolve_first_move(commitment: Commitment, guess: int) -> FirstMoveResolution:
    """
    Decide who moves first from the user's guess of the committed bit.

    The user moves first on a correct guess, the computer otherwise. The key is
    disclosed either way so the user can run ``verify``.

    Raises:
        InvalidSelection: If ``guess`` is not 0 or 1
    """
    if guess not in (0, 1) or isinstance(guess, bool):
        raise InvalidSelection(f"Guess must be 0 or 1, got {guess!r}")

    first_mover: Party = "USER" if guess == commitment.outcome else "COMPUTER"
    logger.info("first move resolved: %s", first_mover)
    return FirstMoveResolution(
        guess=guess,
        outcome=commitment.outcome,
        first_mover=first_mover,
        key=commitment.key,
    )
