from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

Status = Literal["normal", "low", "high", "critical"]
Source = Literal["catalog", "pattern"]


class ExtractedValue(BaseModel):
    """A single lab reading located in the report text."""
    model_config = ConfigDict(frozen=True)

    key: str | None = Field(default=None, description="Canonical catalog key of the matched test")
    name: str = Field(description="Display name of the lab test")
    value: float = Field(description="Numeric value as printed in the report")
    unit: str = Field(description="Unit token as printed in the report")
    source: Source = Field(default="catalog", description="Extraction path that produced the reading")


class ValueAnalysis(BaseModel):
    """Status of one reading against its reference range."""
    model_config = ConfigDict(frozen=True)

    status: Status
    normal_range: str
    explanation: str
    units_comparable: bool = True


class AnalyzedValue(ExtractedValue):
    status: Status
    normal_range: str
    explanation: str
    units_comparable: bool = True


class ScreeningResult(BaseModel):
    """Analysis of one uploaded bloodwork document."""
    model_config = ConfigDict(frozen=True)

    user_id: str
    file_name: str
    uploaded_at: datetime
    values: list[AnalyzedValue]
    summary: str
    recommendations: list[str]

    @computed_field
    @property
    def flagged_count(self) -> int:
        return sum(1 for item in self.values if item.status != "normal")


class ScreeningRecord(BaseModel):
    id: str
    user_id: str
    file_name: str
    uploaded_at: str | None
    values: list[dict]
    summary: str
    recommendations: list[str]
    flagged_count: int
