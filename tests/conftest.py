"""Shared fixtures for Collabia seed tests.

The in-memory store mirrors the SeedStore interface (same repository
attributes and method signatures) with rows kept in insertion order, which
stands in for the database's default ordering.
"""
from __future__ import annotations

import random
import uuid
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any

import pytest

from src.collabia_seed.repository import RecordNotFoundError

# A syntactically valid bcrypt hash; unit tests never verify it.
STATIC_PASSWORD_HASH = "$2b$10$N9qo8uLOickgx2ZMRZoMyeIjZAgcfl7p92ldGxad68LJZdL17lhWy"


class InMemoryRepository:
    """List-backed repository with the same semantics as repository.Repository."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.rows: list[SimpleNamespace] = []
        self.calls: list[str] = []

    @staticmethod
    def _matches(row: SimpleNamespace, where: Mapping[str, Any]) -> bool:
        return all(getattr(row, field, None) == value for field, value in where.items())

    async def find_unique(self, **where: Any) -> SimpleNamespace | None:
        self.calls.append("find_unique")
        matches = [row for row in self.rows if self._matches(row, where)]
        if len(matches) > 1:
            raise RuntimeError(f"{self.name}: multiple rows for unique key {where!r}")
        return matches[0] if matches else None

    async def find_first(
        self,
        *,
        contains: Mapping[str, str] | None = None,
        **where: Any,
    ) -> SimpleNamespace | None:
        self.calls.append("find_first")
        for row in self.rows:
            if not self._matches(row, where):
                continue
            if all(fragment in (getattr(row, field, None) or "") for field, fragment in (contains or {}).items()):
                return row
        return None

    async def find_many(
        self,
        *,
        exclude: Mapping[str, Any] | None = None,
        take: int | None = None,
        **where: Any,
    ) -> list[SimpleNamespace]:
        self.calls.append("find_many")
        matches = [
            row
            for row in self.rows
            if self._matches(row, where)
            and all(getattr(row, field, None) != value for field, value in (exclude or {}).items())
        ]
        return matches if take is None else matches[:take]

    async def count(self, **where: Any) -> int:
        return sum(1 for row in self.rows if self._matches(row, where))

    async def create(self, **data: Any) -> SimpleNamespace:
        self.calls.append("create")
        row = SimpleNamespace(id=str(uuid.uuid4()), **data)
        self.rows.append(row)
        return row

    async def update(self, where: Mapping[str, Any], data: Mapping[str, Any]) -> SimpleNamespace:
        self.calls.append("update")
        row = await self.find_unique(**where)
        if row is None:
            raise RecordNotFoundError(self.name, where)
        for field, value in data.items():
            setattr(row, field, value)
        return row

    def delete(self, **where: Any) -> int:
        before = len(self.rows)
        self.rows = [row for row in self.rows if not self._matches(row, where)]
        return before - len(self.rows)


class InMemoryStore:
    """SeedStore double: one InMemoryRepository per entity plus a commit counter."""

    def __init__(self) -> None:
        self.users = InMemoryRepository("User")
        self.current_books = InMemoryRepository("CurrentBook")
        self.current_skills = InMemoryRepository("CurrentSkill")
        self.current_games = InMemoryRepository("CurrentGame")
        self.posts = InMemoryRepository("Post")
        self.interest_posts = InMemoryRepository("InterestPost")
        self.interest_likes = InMemoryRepository("InterestLike")
        self.interest_comments = InMemoryRepository("InterestComment")
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    def row_counts(self) -> dict[str, int]:
        return {
            name: len(repository.rows)
            for name, repository in vars(self).items()
            if isinstance(repository, InMemoryRepository)
        }


@pytest.fixture
def memory_store() -> InMemoryStore:
    """Empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def password_hash() -> str:
    """Precomputed password hash shared by all seeded users."""
    return STATIC_PASSWORD_HASH


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for like fan-out assertions."""
    return random.Random(20240917)
