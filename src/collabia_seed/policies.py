"""Reconciliation policies: how a fixture record converges onto an existing row.

Two policies are in use:

- UpsertOverwrite: create the row if missing, otherwise overwrite a fixed set
  of fields on every run. Used for user discovery fields.
- CreateIfAbsent: create the row if missing, otherwise leave it alone
  (first write wins). Used for everything else.
"""
from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol


class Outcome(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    EXISTING = "existing"


class SupportsReconcile(Protocol):
    async def find_unique(self, **where: Any) -> Any: ...

    async def find_first(self, **where: Any) -> Any: ...

    async def create(self, **data: Any) -> Any: ...

    async def update(self, where: Mapping[str, Any], data: Mapping[str, Any]) -> Any: ...


@dataclass(frozen=True)
class Reconciled:
    record: Any
    outcome: Outcome

    @property
    def created(self) -> bool:
        return self.outcome is Outcome.CREATED


@dataclass(frozen=True)
class CreateIfAbsent:
    """Create the row when no row matches `key`; never modify an existing one."""

    async def apply(
        self,
        repository: SupportsReconcile,
        key: Mapping[str, Any],
        data: Mapping[str, Any],
    ) -> Reconciled:
        existing = await repository.find_first(**key)
        if existing is not None:
            return Reconciled(existing, Outcome.EXISTING)
        created = await repository.create(**{**data, **key})
        return Reconciled(created, Outcome.CREATED)


@dataclass(frozen=True)
class UpsertOverwrite:
    """Create the row when `key` is unmatched, otherwise overwrite only `fields`.

    `key` must identify at most one row. Fields listed here but absent from
    `data` are overwritten with None.
    """

    fields: tuple[str, ...]

    async def apply(
        self,
        repository: SupportsReconcile,
        key: Mapping[str, Any],
        data: Mapping[str, Any],
    ) -> Reconciled:
        existing = await repository.find_unique(**key)
        if existing is None:
            created = await repository.create(**{**data, **key})
            return Reconciled(created, Outcome.CREATED)
        changes = {field: data.get(field) for field in self.fields}
        updated = await repository.update(key, changes)
        return Reconciled(updated, Outcome.UPDATED)
