"""Tests registry : enregistrement des types de blocs + skip serialization."""
import pytest
from block_supports import BlockTypeRegistrationError, BlockTypeRegistry, get_default_registry
from block_supports.registry import should_skip_serialization
from block_supports.schemas import BlockType


# ── BlockTypeRegistry ───────────────────────────────────────────────────────

def test_register_and_get():
    registry = BlockTypeRegistry()
    block_type = registry.register("acme/card", supports={"color": {"link": True}}, title="Card")
    assert registry.get_registered("acme/card") is block_type
    assert registry.is_registered("acme/card")
    assert block_type.title == "Card"


def test_register_duplicate_raises():
    registry = BlockTypeRegistry()
    registry.register("acme/card")
    with pytest.raises(BlockTypeRegistrationError):
        registry.register("acme/card")


@pytest.mark.parametrize("name", ["card", "Acme/Card", "acme/", "acme/card/x", "", None])
def test_register_invalid_name_raises(name):
    with pytest.raises(BlockTypeRegistrationError):
        BlockTypeRegistry().register(name)


def test_registration_error_is_value_error():
    with pytest.raises(ValueError):
        BlockTypeRegistry().register("invalid")


def test_unregister():
    registry = BlockTypeRegistry()
    registry.register("acme/card")
    assert registry.unregister("acme/card").name == "acme/card"
    assert not registry.is_registered("acme/card")
    with pytest.raises(BlockTypeRegistrationError):
        registry.unregister("acme/card")


def test_get_registered_unknown_or_empty():
    registry = BlockTypeRegistry()
    assert registry.get_registered("acme/none") is None
    assert registry.get_registered(None) is None


def test_default_registry_has_core_blocks():
    names = {bt.name for bt in get_default_registry().get_all_registered()}
    assert {"core/paragraph", "core/group", "core/heading", "core/button"} <= names
    assert get_default_registry() is get_default_registry()


# ── should_skip_serialization ───────────────────────────────────────────────

def test_skip_unknown_block_type():
    assert should_skip_serialization(None, "color", "link") is False


def test_skip_boolean():
    bt = BlockType(name="acme/a", supports={"color": {"__experimentalSkipSerialization": True}})
    assert should_skip_serialization(bt, "color", "link") is True
    assert should_skip_serialization(bt, "color") is True
    assert should_skip_serialization(bt, "typography") is False


def test_skip_feature_list():
    bt = BlockType(name="acme/a", supports={"color": {"__experimentalSkipSerialization": ["link", "heading"]}})
    assert should_skip_serialization(bt, "color", "link") is True
    assert should_skip_serialization(bt, "color", "button") is False


def test_skip_without_flag():
    bt = BlockType(name="acme/a", supports={"color": {"link": True}})
    assert should_skip_serialization(bt, "color", "link") is False
    assert should_skip_serialization(bt, "", "link") is False
