from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from subscription_service.exceptions import ServerError

if TYPE_CHECKING:
    from subscription_service.store import DataStore


@dataclass(frozen=True)
class Loaded:
    row: dict


@dataclass(frozen=True)
class Empty:
    pass


EMPTY = Empty()

RowState = Union[Loaded, Empty]


class EntityHandle:
    """
    Handle over one storage row. Built by the module-level lookups, never
    from client input. Every read or mutation goes through `_row`, which
    refuses to work on an Empty handle.
    """

    entity_name = "Entity"

    def __init__(self, store: "DataStore", row: dict | None):
        self._store = store
        self._state: RowState = Loaded(row) if row is not None else EMPTY

    @property
    def is_loaded(self) -> bool:
        return isinstance(self._state, Loaded)

    def clear(self) -> None:
        self._state = EMPTY

    def _row(self, action: str) -> dict:
        if isinstance(self._state, Loaded):
            return self._state.row
        raise ServerError(f"{self.entity_name} was not loaded, cannot {action}")

    def _set_row(self, row: dict) -> None:
        self._state = Loaded(row)

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "empty"
        return f"<{type(self).__name__} {state}>"
