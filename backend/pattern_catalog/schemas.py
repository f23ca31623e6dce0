from pydantic import BaseModel, ConfigDict, Field
from typing import List

from pattern_catalog.loader.records import PatternRecord


class PatternCreateRequest(PatternRecord):
    """Request body for adding a single pattern"""


class AmendRequest(BaseModel):
    """Append-only edit of a pattern's free-text lists"""
    model_config = ConfigDict(populate_by_name=True)

    notes: List[str] = Field(default_factory=list)
    applicability: List[str] = Field(default_factory=list)
    known_uses: List[str] = Field(default_factory=list, alias="knownUses")


class ViolationOut(BaseModel):
    entry_name: str
    kind: str
    detail: str = ""


class ValidationResponse(BaseModel):
    is_valid: bool
    violations: List[ViolationOut] = []


class PatternListResponse(BaseModel):
    count: int
    patterns: List[dict]
