from pydantic import BaseModel, ConfigDict, Field
from typing import List


class PatternRecord(BaseModel):
    """One pattern as it appears in an import document"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    category: str
    summary: str
    applicability: List[str] = Field(default_factory=list)
    known_uses: List[str] = Field(default_factory=list, alias="knownUses")
    notes: List[str] = Field(default_factory=list)
    related_patterns: List[str] = Field(default_factory=list, alias="relatedPatterns")
    tags: List[str] = Field(default_factory=list)
