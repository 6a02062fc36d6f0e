from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from internest.schemas.common import ApiModel


class EducationCount(BaseModel):
    education_level: str
    count: int


class SectorCount(BaseModel):
    sector: str
    count: int


class LocationCount(BaseModel):
    location: str
    count: int


class DailyCount(BaseModel):
    date: date
    count: int


class StatsOverview(ApiModel):
    total: int
    by_education: list[EducationCount]
    by_sector: list[SectorCount]
    by_location: list[LocationCount]
    recent: list[DailyCount]


class StatsResponse(ApiModel):
    success: bool = True
    data: StatsOverview
