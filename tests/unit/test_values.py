"""Tests for runtime values, storage cells and the environment."""

from __future__ import annotations

import pytest

from mylang.core.errors import UndefinedNameError, ValueTypeError
from mylang.core.ir.values import Environment, RuntimeValue, StorageCell, ValueKind


class TestRuntimeValue:
    """Tagged union of absent, integer and reference values."""

    def test_kinds(self) -> None:
        assert RuntimeValue.absent().kind == ValueKind.ABSENT
        assert RuntimeValue.of_int(1).kind == ValueKind.INT
        assert RuntimeValue.of_ref(StorageCell()).kind == ValueKind.REF

    def test_unwrap_follows_reference(self) -> None:
        cell = StorageCell(4)
        ref = RuntimeValue.of_ref(cell)
        assert ref.unwrap() == 4
        cell.value = 5
        assert ref.unwrap() == 5
        assert ref.deref() == RuntimeValue.of_int(5)

    def test_unwrap_absent(self) -> None:
        with pytest.raises(ValueTypeError):
            RuntimeValue.absent().unwrap()

    def test_render(self) -> None:
        assert RuntimeValue.of_int(-7).render() == "-7"
        assert RuntimeValue.absent().render() == "none"
        assert RuntimeValue.of_ref(StorageCell(3)).render() == "ref(3)"


class TestStorageCell:
    """Cells hold integers and reject anything else."""

    def test_store_and_load(self) -> None:
        cell = StorageCell()
        cell.store(RuntimeValue.of_int(12))
        assert cell.load() == RuntimeValue.of_int(12)

    @pytest.mark.parametrize(
        "value",
        [RuntimeValue.absent(), RuntimeValue.of_ref(StorageCell(1))],
    )
    def test_store_rejects_non_integers(self, value: RuntimeValue) -> None:
        cell = StorageCell(8)
        with pytest.raises(ValueTypeError):
            cell.store(value)
        assert cell.value == 8


class TestEnvironment:
    """Names are declared implicitly on first bind."""

    def test_lookup_missing(self, env: Environment) -> None:
        with pytest.raises(UndefinedNameError) as exc_info:
            env.lookup("nope")
        assert exc_info.value.name == "nope"

    def test_bind_creates_once(self, env: Environment) -> None:
        first = env.bind("x")
        assert env.bind("x") is first
        assert env.lookup("x") is first
        assert len(env) == 1
        assert "x" in env
        assert "y" not in env

    def test_names_and_snapshot(self, env: Environment) -> None:
        env.bind("a").store(RuntimeValue.of_int(1))
        env.bind("b").store(RuntimeValue.of_int(2))
        assert sorted(env.names()) == ["a", "b"]
        assert env.snapshot() == {"a": 1, "b": 2}

    def test_assign_declares_on_first_store(self, env: Environment) -> None:
        cell = env.assign("x", RuntimeValue.of_int(3))
        assert env.lookup("x") is cell
        assert env.assign("x", RuntimeValue.of_int(4)) is cell
        assert env.snapshot() == {"x": 4}

    def test_failed_assign_declares_nothing(self, env: Environment) -> None:
        with pytest.raises(ValueTypeError):
            env.assign("x", RuntimeValue.absent())
        assert "x" not in env
