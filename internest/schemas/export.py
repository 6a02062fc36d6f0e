from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class RawPreferenceRow(BaseModel):
    id: int
    session_id: str | None
    user_ip: str | None
    education: str | None
    skills: str | None
    sector: str | None
    location: str | None
    created_at: datetime | None
    updated_at: datetime | None


class ExportPagination(BaseModel):
    limit: int
    offset: int


class FeatureSet(BaseModel):
    education_level: str
    skills: list[str]
    sector: str
    location: str


class FeatureMetadata(BaseModel):
    created_at: datetime | None
    session_id: str | None
    user_ip: str | None


class FeatureVector(BaseModel):
    id: int
    features: FeatureSet
    metadata: FeatureMetadata


class RawExportResponse(BaseModel):
    success: bool = True
    count: int
    data: list[RawPreferenceRow]
    pagination: ExportPagination


class FeatureExportResponse(BaseModel):
    success: bool = True
    format: Literal["ml_ready", "normalized"]
    count: int
    data: list[FeatureVector]
