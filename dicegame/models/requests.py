"""Pydantic request models for the verification API."""

from typing import List

from pydantic import BaseModel, Field


class VerifyRequest(BaseModel):
    """A revealed round to check against its published digest."""
    digest: str
    key: str
    outcome: int = Field(ge=0, le=1)


class ProbabilitiesRequest(BaseModel):
    """Dice definitions in command line form, e.g. ``"1,2,3"``."""
    dice: List[str]
