"""SQLAlchemy ORM table models: typed snake_case row contracts."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import JSON


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class CandidateProfileRow(Base):
    """Candidate profile table."""

    __tablename__ = "candidate_profiles"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    user_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    headline: Mapped[str | None] = mapped_column(String(500), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    skills: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    skills_with_levels: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    salary_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    salary_max: Mapped[int | None] = mapped_column(Integer, nullable=True)
    salary_currency: Mapped[str | None] = mapped_column(String(10), nullable=True)
    preferred_work_mode: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    willing_to_relocate: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    interested_industries: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    values_list: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    character_traits: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    preferred_company_size: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    team_collaboration_preferences: Mapped[dict[str, Any] | None] = mapped_column(
        JSON, nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )


class CompanyProfileRow(Base):
    """Company profile table, including the unlock credit balance."""

    __tablename__ = "company_profiles"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    industry: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    values: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    desired_traits: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    funding_stage: Mapped[str | None] = mapped_column(String(50), nullable=True)
    remote_policy: Mapped[str | None] = mapped_column(Text, nullable=True)
    headquarters_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    company_size_range: Mapped[str | None] = mapped_column(String(50), nullable=True)
    team_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    credits: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )


class JobRow(Base):
    """Job posting table."""

    __tablename__ = "jobs"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    company_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("company_profiles.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    status: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    required_skills: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    required_skills_with_levels: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )


class CandidateUnlockRow(Base):
    """Paid company access to a candidate profile. One row per pair."""

    __tablename__ = "candidate_unlocks"
    __table_args__ = (
        UniqueConstraint("candidate_id", "company_id", name="uq_candidate_unlocks_pair"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    candidate_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("candidate_profiles.id"), nullable=False
    )
    company_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("company_profiles.id"), nullable=False
    )
    unlocked_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    cost_credits: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )


class AuditLogRow(Base):
    """API audit trail table."""

    __tablename__ = "api_audit_logs"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    action: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    company_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    candidate_id: Mapped[str] = mapped_column(String(36), nullable=False)
    metadata_json: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata", JSON, nullable=True
    )
    success: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )
