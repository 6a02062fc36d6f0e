from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from internest.database import Base


ANONYMOUS_SESSION = "anonymous"


class SearchLog(Base):
    __tablename__ = "search_logs"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(String(255), nullable=False, default=ANONYMOUS_SESSION, index=True)
    user_ip = Column(String(255), nullable=True)

    # JSON-serialized copy of the query parameters.
    search_params = Column(Text, nullable=False)
    results_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
