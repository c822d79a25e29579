"""Pydantic response models for the verification API."""

from typing import List

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    env: str
    version: str


class VerifyResponse(BaseModel):
    """Whether the revealed key and outcome reproduce the digest."""
    valid: bool
    algorithm: str


class DiceProbability(BaseModel):
    """Win probability of one dice against the others."""
    dice: str
    sum: int
    wins: int
    total_comparisons: int
    win_probability: float  # percent


class ProbabilitiesResponse(BaseModel):
    """Win probabilities for every submitted dice."""
    probabilities: List[DiceProbability]
