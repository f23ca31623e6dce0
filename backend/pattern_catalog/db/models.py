from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

class PatternRow(Base):
    __tablename__ = "patterns"

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False, index=True)  # catalog insertion order
    name = Column(String(200), nullable=False, unique=True)
    category = Column(String(32), nullable=False)
    summary = Column(Text, nullable=False)
    lists = Column(Text, nullable=False, default="{}")  # JSON: applicability, knownUses, notes, ...
    saved_at = Column(DateTime(timezone=True), server_default=func.now())
