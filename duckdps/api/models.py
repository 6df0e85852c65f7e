"""Pydantic response models for the run data API."""

from typing import Any

from pydantic import BaseModel

from duckdps.pipeline.breakdown import SkillStatRow


class RunDataResponse(BaseModel):
    runData: Any
    skillDictionary: dict[str, str]


class ZeroDamageResponse(BaseModel):
    message: str
    data: list[SkillStatRow] = []


class ErrorResponse(BaseModel):
    error: str
