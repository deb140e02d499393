import logging

import pytest

from ods_styles import (
    DuplicateNameError,
    FrozenRegistryError,
    InvalidModeError,
    KeyedRegistry,
    MissingNameError,
    Mode,
)


def _registry(*names):
    reg = KeyedRegistry("test")
    for n in names:
        assert reg.add(n, f"{n}-v1", Mode.CREATE)
    return reg


def test_create_twice_fails_and_keeps_first_value():
    reg = KeyedRegistry("test")
    assert reg.add("A", "first", Mode.CREATE) is True
    assert reg.add("A", "second", Mode.CREATE) is False
    assert reg.get("A") == "first"
    assert len(reg) == 1


def test_update_missing_name_fails_without_mutation():
    reg = _registry("A")
    assert reg.add("B", "b", Mode.UPDATE) is False
    assert "B" not in reg
    assert reg.values() == ("A-v1",)


def test_update_keeps_position():
    reg = _registry("A", "B", "C")
    assert reg.add("A", "A-v2", Mode.UPDATE) is True
    assert reg.values() == ("A-v2", "B-v1", "C-v1")
    assert reg.names() == ("A", "B", "C")


@pytest.mark.parametrize("name", ["A", "Z"])
def test_create_or_update_always_succeeds(name):
    reg = _registry("A", "B")
    assert reg.add(name, "new", Mode.CREATE_OR_UPDATE) is True
    assert reg.get(name) == "new"


def test_create_or_update_on_new_name_appends():
    reg = _registry("A")
    reg.add("B", "b", Mode.CREATE_OR_UPDATE)
    reg.add("A", "A-v2", Mode.CREATE_OR_UPDATE)
    assert reg.values() == ("A-v2", "b")


def test_frozen_registry_refuses_every_mode():
    reg = _registry("A", "B")
    reg.freeze()
    for mode in Mode:
        with pytest.raises(FrozenRegistryError):
            reg.add("A", "x", mode)
        with pytest.raises(FrozenRegistryError):
            reg.add("C", "x", mode)
    with pytest.raises(FrozenRegistryError):
        reg.register("C", "x")
    assert reg.frozen
    assert reg.values() == ("A-v1", "B-v1")


def test_accepts_predicts_add_without_mutating():
    reg = _registry("A")
    assert reg.accepts("A", Mode.CREATE) is False
    assert reg.accepts("B", Mode.CREATE) is True
    assert reg.accepts("A", "update") is True
    assert reg.accepts("B", Mode.UPDATE) is False
    assert reg.accepts("B", Mode.CREATE_OR_UPDATE) is True
    assert reg.names() == ("A",)
    reg.freeze()
    with pytest.raises(FrozenRegistryError):
        reg.accepts("B", Mode.CREATE_OR_UPDATE)


def test_register_is_strict_about_conflicting_values():
    reg = _registry("A")
    with pytest.raises(DuplicateNameError) as info:
        reg.register("A", "other")
    assert info.value.name == "A"
    assert reg.get("A") == "A-v1"


def test_register_same_value_is_a_noop():
    reg = _registry("A")
    assert reg.register("A", "A-v1") is False
    assert reg.values() == ("A-v1",)


def test_register_update_missing_raises():
    reg = _registry("A")
    with pytest.raises(MissingNameError):
        reg.register("B", "b", Mode.UPDATE)
    assert reg.register("A", "A-v2", Mode.UPDATE) is True


def test_require_missing_raises():
    reg = _registry("A")
    assert reg.require("A") == "A-v1"
    with pytest.raises(MissingNameError):
        reg.require("nope")


def test_as_dict_is_read_only():
    reg = _registry("A")
    view = reg.as_dict()
    with pytest.raises(TypeError):
        view["B"] = "b"  # type: ignore[index]


def test_mode_coerce_accepts_strings():
    assert Mode.coerce("create") is Mode.CREATE
    assert Mode.coerce("CREATE_OR_UPDATE") is Mode.CREATE_OR_UPDATE
    assert Mode.coerce("create-or-update") is Mode.CREATE_OR_UPDATE
    reg = KeyedRegistry()
    assert reg.add("A", 1, "update") is False
    with pytest.raises(InvalidModeError):
        Mode.coerce("upsert")
    with pytest.raises(InvalidModeError):
        reg.add("A", 1, 3)  # type: ignore[arg-type]


def test_debug_logs_refused_duplicates(caplog):
    reg = _registry("A")
    reg.debug()
    with caplog.at_level(logging.WARNING, logger="ods_styles"):
        assert reg.add("A", "again", Mode.CREATE) is False
    assert any("'A'" in r.getMessage() and "again" in r.getMessage() for r in caplog.records)
