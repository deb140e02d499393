import pytest

from ods_styles import Dest, DuplicateNameError, FrozenRegistryError, Mode, MultiRegistry


def test_same_name_in_each_destination():
    reg = MultiRegistry(Dest)
    for dest in Dest:
        assert reg.add("S", dest, f"S in {dest.name}") is True
    for dest in Dest:
        assert reg.values(dest) == (f"S in {dest.name}",)
        assert reg.get("S", dest) == f"S in {dest.name}"


def test_duplicates_detected_within_destination():
    reg = MultiRegistry(Dest)
    reg.add("S", Dest.STYLES_COMMON_STYLES, "a")
    assert reg.add("S", Dest.STYLES_COMMON_STYLES, "b") is False
    with pytest.raises(DuplicateNameError):
        reg.register("S", Dest.STYLES_COMMON_STYLES, "b")
    assert reg.values(Dest.STYLES_COMMON_STYLES) == ("a",)
    assert reg.values(Dest.CONTENT_AUTOMATIC_STYLES) == ()


def test_freeze_cascades():
    reg = MultiRegistry(Dest)
    reg.add("A", Dest.CONTENT_AUTOMATIC_STYLES, "a")
    reg.freeze()
    assert reg.frozen
    for dest in Dest:
        for mode in Mode:
            with pytest.raises(FrozenRegistryError):
                reg.add("X", dest, "x", mode)
    assert reg.values(Dest.CONTENT_AUTOMATIC_STYLES) == ("a",)


def test_unknown_destination():
    reg = MultiRegistry(Dest)
    with pytest.raises(KeyError):
        reg.values("nowhere")  # type: ignore[arg-type]
