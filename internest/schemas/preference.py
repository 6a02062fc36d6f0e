from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from internest.schemas.common import ApiModel, Pagination


class PreferenceFields(ApiModel):
    education: str | None = None
    skills: str | None = None
    sector: str | None = None
    location: str | None = None


class PreferenceSubmission(PreferenceFields):
    education: str | None = Field(default=None, max_length=100)
    skills: str | None = Field(default=None, max_length=500)
    sector: str | None = Field(default=None, max_length=100)
    location: str | None = Field(default=None, max_length=100)
    session_id: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("education", "skills", "sector", "location", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        # Preference fields are trimmed; empty strings are stored as NULL.
        if isinstance(v, str):
            return v.strip() or None
        return v

    def to_store_fields(self) -> dict[str, str | None]:
        return {
            "education_level": self.education,
            "skills": self.skills,
            "sector": self.sector,
            "location": self.location,
        }


class PreferenceCreated(ApiModel):
    id: int
    session_id: str
    preferences: PreferenceFields


class PreferenceCreateResponse(ApiModel):
    success: bool = True
    message: str
    data: PreferenceCreated


class PreferenceOut(ApiModel):
    id: int
    session_id: str | None
    user_ip: str | None = Field(default=None, serialization_alias="userIP")
    preferences: PreferenceFields
    created_at: datetime | None
    updated_at: datetime | None


class PreferenceResponse(ApiModel):
    success: bool = True
    data: PreferenceOut


class PreferenceListResponse(ApiModel):
    success: bool = True
    data: list[PreferenceOut]
    pagination: Pagination


class PreferenceUpdated(ApiModel):
    id: int
    preferences: PreferenceFields


class PreferenceUpdateResponse(ApiModel):
    success: bool = True
    message: str
    data: PreferenceUpdated
