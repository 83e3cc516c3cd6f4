"""Data-access layer used by the seeding reconciler.

One generic Repository per mapped model exposes the handful of operations the
reconciler needs: unique lookup, first-match lookup (with optional substring
predicates), bounded listing with an exclusion filter, create and update.
Field names are the models' Python attribute names.

Repositories never commit. SeedStore.commit() ends the current unit of work.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.collabia_seed.database import Base
from src.collabia_seed.models import (
    CurrentBook,
    CurrentGame,
    CurrentSkill,
    InterestComment,
    InterestLike,
    InterestPost,
    Post,
    User,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SeedError(Exception):
    """Base class for errors raised by the seeding package."""


class RecordNotFoundError(SeedError):
    """An update targeted a row that does not exist."""

    def __init__(self, model: str, where: Mapping[str, Any]) -> None:
        super().__init__(f"{model} not found for {dict(where)!r}")
        self.model = model
        self.where = dict(where)


class Repository(Generic[ModelT]):
    """CRUD operations for a single mapped model."""

    def __init__(self, session: AsyncSession, model: type[ModelT]) -> None:
        self._session = session
        self._model = model

    @property
    def model_name(self) -> str:
        return self._model.__name__

    def _column(self, field: str) -> Any:
        try:
            return getattr(self._model, field)
        except AttributeError:
            raise ValueError(f"{self.model_name} has no field {field!r}") from None

    def _select(self, where: Mapping[str, Any]) -> Select[tuple[ModelT]]:
        stmt = select(self._model)
        for field, value in where.items():
            stmt = stmt.where(self._column(field) == value)
        return stmt

    async def find_unique(self, **where: Any) -> ModelT | None:
        """Return the row matching a unique key, or None."""
        result = await self._session.execute(self._select(where))
        return result.scalar_one_or_none()

    async def find_first(
        self,
        *,
        contains: Mapping[str, str] | None = None,
        **where: Any,
    ) -> ModelT | None:
        """Return the first row matching all predicates, in the database's default order.

        Args:
            contains: field -> fragment pairs matched as case-sensitive substrings.
            **where: field -> value equality predicates.
        """
        stmt = self._select(where)
        for field, fragment in (contains or {}).items():
            stmt = stmt.where(self._column(field).contains(fragment, autoescape=True))
        result = await self._session.execute(stmt.limit(1))
        return result.scalars().first()

    async def find_many(
        self,
        *,
        exclude: Mapping[str, Any] | None = None,
        take: int | None = None,
        **where: Any,
    ) -> list[ModelT]:
        """Return up to `take` rows matching `where` and differing from every `exclude` value."""
        stmt = self._select(where)
        for field, value in (exclude or {}).items():
            stmt = stmt.where(self._column(field) != value)
        if take is not None:
            stmt = stmt.limit(take)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, **where: Any) -> int:
        stmt = select(func.count()).select_from(self._model)
        for field, value in where.items():
            stmt = stmt.where(self._column(field) == value)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def create(self, **data: Any) -> ModelT:
        """Insert a row and return it with its generated id populated."""
        instance = self._model(**data)
        self._session.add(instance)
        await self._session.flush()
        return instance

    async def update(self, where: Mapping[str, Any], data: Mapping[str, Any]) -> ModelT:
        """Overwrite `data` fields on the row matching the unique key `where`.

        Raises:
            RecordNotFoundError: no row matches `where`.
        """
        instance = await self.find_unique(**where)
        if instance is None:
            raise RecordNotFoundError(self.model_name, where)
        unknown = [field for field in data if not hasattr(self._model, field)]
        if unknown:
            raise ValueError(f"{self.model_name} has no fields {unknown!r}")
        for field, value in data.items():
            setattr(instance, field, value)
        await self._session.flush()
        return instance


class SeedStore:
    """One repository per Collabia entity, sharing a single session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.users: Repository[User] = Repository(session, User)
        self.current_books: Repository[CurrentBook] = Repository(session, CurrentBook)
        self.current_skills: Repository[CurrentSkill] = Repository(session, CurrentSkill)
        self.current_games: Repository[CurrentGame] = Repository(session, CurrentGame)
        self.posts: Repository[Post] = Repository(session, Post)
        self.interest_posts: Repository[InterestPost] = Repository(session, InterestPost)
        self.interest_likes: Repository[InterestLike] = Repository(session, InterestLike)
        self.interest_comments: Repository[InterestComment] = Repository(session, InterestComment)

    async def commit(self) -> None:
        await self._session.commit()
        logger.debug("Committed seed unit of work")
