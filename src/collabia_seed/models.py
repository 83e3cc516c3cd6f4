"""
SQLAlchemy ORM models mapped onto the Collabia application schema.

The schema is owned by the application backend. Table and column names follow
its conventions (PascalCase tables, camelCase columns); Python attributes are
snake_case.

Tables:
  User            - profile, matching flags and free-text discovery fields
  CurrentBook     - at most one per user
  CurrentSkill    - at most one per user
  CurrentGame     - at most one per user
  Post            - legacy general-purpose post, optionally linked to an interest
  InterestPost    - per-interest post (book / skill / game)
  InterestLike    - user × interest post engagement
  InterestComment - comment on an interest post
"""
from __future__ import annotations

import enum
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from src.collabia_seed.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class BookStatus(str, enum.Enum):
    READING = "reading"
    COMPLETED = "completed"
    PAUSED = "paused"


class SkillLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class GameFrequency(str, enum.Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    OCCASIONALLY = "occasionally"


class InterestType(str, enum.Enum):
    BOOK = "book"
    SKILL = "skill"
    GAME = "game"


class LookingFor(str, enum.Enum):
    COFOUNDER = "cofounder"
    TEAM = "team"
    FREELANCE = "freelance"
    LEARN = "learn"


# Free-text attributes that drive "same interest" matching. Refreshed on every seed run.
DISCOVERY_FIELDS: tuple[str, ...] = (
    "current_book",
    "current_game",
    "current_skill",
    "what_im_building",
    "looking_for",
)


class User(Base):
    __tablename__ = "User"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    school: Mapped[Optional[str]] = mapped_column(String(255))
    location: Mapped[Optional[str]] = mapped_column(String(255))
    bio: Mapped[Optional[str]] = mapped_column(Text)
    skills: Mapped[list[str]] = mapped_column(ARRAY(String), default=list, nullable=False)
    interests: Mapped[list[str]] = mapped_column(ARRAY(String), default=list, nullable=False)

    open_to_study_partner: Mapped[bool] = mapped_column(
        "openToStudyPartner", Boolean, default=False, nullable=False
    )
    open_to_projects: Mapped[bool] = mapped_column(
        "openToProjects", Boolean, default=False, nullable=False
    )
    open_to_accountability: Mapped[bool] = mapped_column(
        "openToAccountability", Boolean, default=False, nullable=False
    )
    open_to_cofounder: Mapped[bool] = mapped_column(
        "openToCofounder", Boolean, default=False, nullable=False
    )
    open_to_helping_others: Mapped[bool] = mapped_column(
        "openToHelpingOthers", Boolean, default=False, nullable=False
    )
    school_verified: Mapped[bool] = mapped_column(
        "schoolVerified", Boolean, default=False, nullable=False
    )

    current_book: Mapped[Optional[str]] = mapped_column("currentBook", String(255))
    current_game: Mapped[Optional[str]] = mapped_column("currentGame", String(255))
    current_skill: Mapped[Optional[str]] = mapped_column("currentSkill", String(255))
    what_im_building: Mapped[Optional[str]] = mapped_column("whatImBuilding", Text)
    looking_for: Mapped[Optional[str]] = mapped_column("lookingFor", String(20))

    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, server_default=func.now(), nullable=False
    )


class CurrentBook(Base):
    __tablename__ = "CurrentBook"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(
        "userId", String(36), ForeignKey("User.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    total_pages: Mapped[Optional[int]] = mapped_column("totalPages", Integer)
    pages_read: Mapped[int] = mapped_column("pagesRead", Integer, default=0, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=BookStatus.READING.value, nullable=False
    )
    start_date: Mapped[datetime] = mapped_column(
        "startDate", DateTime, server_default=func.now(), nullable=False
    )


class CurrentSkill(Base):
    __tablename__ = "CurrentSkill"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(
        "userId", String(36), ForeignKey("User.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    level: Mapped[str] = mapped_column(
        String(20), default=SkillLevel.BEGINNER.value, nullable=False
    )
    notes: Mapped[Optional[str]] = mapped_column(Text)
    start_date: Mapped[datetime] = mapped_column(
        "startDate", DateTime, server_default=func.now(), nullable=False
    )


class CurrentGame(Base):
    __tablename__ = "CurrentGame"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(
        "userId", String(36), ForeignKey("User.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    rank: Mapped[Optional[str]] = mapped_column(String(100))
    frequency: Mapped[Optional[str]] = mapped_column(String(20))
    start_date: Mapped[datetime] = mapped_column(
        "startDate", DateTime, server_default=func.now(), nullable=False
    )


class Post(Base):
    __tablename__ = "Post"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    author_id: Mapped[str] = mapped_column(
        "authorId", String(36), ForeignKey("User.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    tags: Mapped[list[str]] = mapped_column(ARRAY(String), default=list, nullable=False)
    interest_type: Mapped[Optional[str]] = mapped_column("interestType", String(20))
    interest_value: Mapped[Optional[str]] = mapped_column("interestValue", String(255))
    # Page number reached when the post was written (book posts only).
    progress_snapshot: Mapped[Optional[int]] = mapped_column("progressSnapshot", Integer)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, server_default=func.now(), nullable=False
    )

    __table_args__ = (Index("idx_post_author", "authorId"),)


class InterestPost(Base):
    __tablename__ = "InterestPost"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(
        "userId", String(36), ForeignKey("User.id", ondelete="CASCADE"), nullable=False
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    interest_value: Mapped[str] = mapped_column("interestValue", String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    progress_snapshot: Mapped[Optional[int]] = mapped_column("progressSnapshot", Integer)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, server_default=func.now(), nullable=False
    )

    __table_args__ = (
        # Same-interest feed lookups
        Index("idx_interest_post_type_value", "type", "interestValue"),
    )


class InterestLike(Base):
    __tablename__ = "InterestLike"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    post_id: Mapped[str] = mapped_column(
        "postId", String(36), ForeignKey("InterestPost.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        "userId", String(36), ForeignKey("User.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, server_default=func.now(), nullable=False
    )

    __table_args__ = (Index("idx_interest_like_post", "postId"),)


class InterestComment(Base):
    __tablename__ = "InterestComment"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    post_id: Mapped[str] = mapped_column(
        "postId", String(36), ForeignKey("InterestPost.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        "userId", String(36), ForeignKey("User.id", ondelete="CASCADE"), nullable=False
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, server_default=func.now(), nullable=False
    )

    __table_args__ = (Index("idx_interest_comment_post", "postId"),)
