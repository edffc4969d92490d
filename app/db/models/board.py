from sqlalchemy import Column, String, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import JSONB
from app.db.base import Base

# JSONB on Postgres, plain JSON text elsewhere
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class Board(Base):
    __tablename__ = "boards"

    project_id = Column(String, primary_key=True)
    cards = Column(JSONDocument, nullable=True, server_default="[]")
    steps = Column(JSONDocument, nullable=True, server_default="[]")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
