"""Fairness router: lets an observer check a round after the key is revealed."""

from fastapi import APIRouter, HTTPException

from dicegame.constants import HMAC_ALGORITHM_NAME
from dicegame.errors import ConfigurationError
from dicegame.models.requests import ProbabilitiesRequest, VerifyRequest
from dicegame.models.responses import DiceProbability, ProbabilitiesResponse, VerifyResponse
from dicegame.services.dice_service import validate_dice_arguments
from dicegame.services.probability_service import calculate_win_probabilities
from dicegame.utils.commit_reveal import verify_digest

router = APIRouter(tags=["fairness"])


@router.post("/verify", response_model=VerifyResponse)
async def verify_round(request: VerifyRequest):
    """Recompute the keyed hash of the revealed outcome and compare it to the digest."""
    valid = verify_digest(request.digest, request.key, request.outcome)
    return VerifyResponse(valid=valid, algorithm=HMAC_ALGORITHM_NAME)


@router.post("/probabilities", response_model=ProbabilitiesResponse)
async def win_probabilities(request: ProbabilitiesRequest):
    """Win probabilities by sum for a set of dice.

    Raises:
        HTTPException: 422 if the dice definitions are invalid
    """
    try:
        dice = validate_dice_arguments(request.dice)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ProbabilitiesResponse(
        probabilities=[
            DiceProbability(
                dice=p.dice.label,
                sum=p.dice.total,
                wins=p.wins,
                total_comparisons=p.total_comparisons,
                win_probability=p.percent,
            )
            for p in calculate_win_probabilities(dice)
        ]
    )
