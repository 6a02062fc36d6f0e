from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from internest.database import Base


class Preference(Base):
    __tablename__ = "preferences"

    id = Column(Integer, primary_key=True, index=True)

    # Not unique: a session accumulates one row per submission.
    session_id = Column(String(255), nullable=True, index=True)
    user_ip = Column(String(255), nullable=True)

    # Raw free text as submitted; normalization happens on read.
    education_level = Column(String(100), nullable=True)
    skills = Column(Text, nullable=True)
    sector = Column(String(100), nullable=True)
    location = Column(String(100), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
