"""
Runtime value model for mylang.

A ``RuntimeValue`` is the tagged result of evaluating any tree node:
absent, a plain integer, or a reference to a ``StorageCell``. Identifiers
evaluate to references so that a binding can target them directly.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from mylang.core.errors import UndefinedNameError, ValueTypeError


class ValueKind(StrEnum):
    """Tags of the runtime value union."""

    ABSENT = "absent"
    INT = "int"
    REF = "ref"


@dataclass
class StorageCell:
    """Mutable storage a variable name resolves to. Holds integers only."""

    value: int = 0

    def load(self) -> RuntimeValue:
        return RuntimeValue.of_int(self.value)

    def store(self, value: RuntimeValue) -> None:
        """Overwrite the cell's contents.

        Raises:
            ValueTypeError: If ``value`` is not a plain integer value.
        """
        if value.kind is not ValueKind.INT:
            raise ValueTypeError(f"cannot store {value.kind} value in an integer cell")
        self.value = value.integer


@dataclass(frozen=True)
class RuntimeValue:
    """Result of evaluating a node."""

    kind: ValueKind
    integer: int = 0
    cell: StorageCell | None = field(default=None, compare=False)

    @classmethod
    def absent(cls) -> RuntimeValue:
        return cls(ValueKind.ABSENT)

    @classmethod
    def of_int(cls, value: int) -> RuntimeValue:
        return cls(ValueKind.INT, integer=value)

    @classmethod
    def of_ref(cls, cell: StorageCell) -> RuntimeValue:
        return cls(ValueKind.REF, cell=cell)

    @property
    def is_ref(self) -> bool:
        return self.kind is ValueKind.REF

    def deref(self) -> RuntimeValue:
        """Plain value: references are replaced by the current cell contents."""
        if self.kind is ValueKind.REF:
            assert self.cell is not None
            return self.cell.load()
        return self

    def unwrap(self) -> int:
        """Return the integer, following a reference if needed.

        Raises:
            ValueTypeError: If the value is absent.
        """
        value = self.deref()
        if value.kind is not ValueKind.INT:
            raise ValueTypeError("expected an integer value, got nothing")
        return value.integer

    def render(self) -> str:
        """Single-line display form."""
        if self.kind is ValueKind.ABSENT:
            return "none"
        if self.kind is ValueKind.REF:
            return f"ref({self.unwrap()})"
        return str(self.integer)


class Environment:
    """Mapping from variable name to storage cell for one evaluation run.

    Names are declared implicitly: the first ``bind`` or successful
    ``assign`` of a name creates its cell, and every later read or store
    targets that same cell.
    """

    def __init__(self) -> None:
        self._cells: dict[str, StorageCell] = {}

    def lookup(self, name: str) -> StorageCell:
        """Return the cell for ``name``.

        Raises:
            UndefinedNameError: If ``name`` was never bound.
        """
        try:
            return self._cells[name]
        except KeyError:
            raise UndefinedNameError(name) from None

    def bind(self, name: str) -> StorageCell:
        """Return the cell for ``name``, creating it on first use."""
        cell = self._cells.get(name)
        if cell is None:
            cell = self._cells[name] = StorageCell()
        return cell

    def assign(self, name: str, value: RuntimeValue) -> StorageCell:
        """Store ``value`` under ``name``, declaring the name on first store.

        Raises:
            ValueTypeError: If ``value`` is not a plain integer. The name is
                not declared when the store fails.
        """
        cell = self._cells.get(name, StorageCell())
        cell.store(value)
        self._cells.setdefault(name, cell)
        return cell

    def names(self) -> Iterator[str]:
        return iter(self._cells)

    def snapshot(self) -> dict[str, int]:
        """Current contents of every cell, by name."""
        return {name: cell.value for name, cell in self._cells.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Environment({self.snapshot()!r})"
