from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, Index
from datetime import datetime

class VerificationCode(SQLModel, table=True):
    """One row per issued code. Rows are never updated or deleted; the
    autoincrement id gives the insertion order used to find the latest.
    Timestamps are naive UTC, compared against SystemClock.now()."""

    __tablename__ = "verification_codes"
    __table_args__ = (Index("ix_verification_codes_phone_id", "phone", "id"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    phone: str = Field(max_length=20)
    code: str = Field(max_length=12)
    issued_at: datetime = Field(sa_column=Column(DateTime(), nullable=False))
    expires_at: datetime = Field(sa_column=Column(DateTime(), nullable=False))
