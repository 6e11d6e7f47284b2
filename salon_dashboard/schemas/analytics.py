from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class DateFilter(str, Enum):
    today = "hoje"
    this_week = "semana"
    all_time = "total"


class HourlyHistogram(BaseModel):
    labels: List[str]
    counts: List[int]


class AggregateResult(BaseModel):
    total_revenue: float
    client_count: int
    average_ticket: float
    hourly_labels: List[str] = Field(default_factory=list)
    hourly_counts: List[int] = Field(default_factory=list)
    total_revenue_display: str = Field(..., description="Two decimals, comma separator")
    average_ticket_display: str = Field(..., description="Two decimals, comma separator")


class ReportResponse(BaseModel):
    period: DateFilter
    generated_at: str
    summary: AggregateResult
