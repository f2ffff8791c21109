"""Tests for entity definition and extension."""

import pytest

from entityshelf import (
    Entity,
    ExposeRule,
    InvalidSpecification,
    NestedRule,
    base_entity,
    define,
    extend,
)


class TestDefine:
    """Tests for building entities from shorthand."""

    def test_keeps_declaration_order(self):
        entity = define({"b": True, "a": True, "c": {"as": "see"}})
        assert entity.keys() == ["b", "a", "c"]

    def test_keyword_definitions_follow_mapping(self):
        entity = define({"id": True}, name=True)
        assert entity.keys() == ["id", "name"]

    def test_false_properties_are_skipped(self):
        entity = define(id=True, secret=False)
        assert entity.keys() == ["id"]

    def test_get(self):
        entity = define(id=True)
        assert isinstance(entity.get("id"), ExposeRule)
        assert entity.get("missing") is None

    def test_duplicate_keys_rejected_on_direct_construction(self):
        with pytest.raises(Exception):
            Entity(properties=(ExposeRule(key="id"), ExposeRule(key="id", **{"as": "x"})))

    def test_base_entity_is_empty(self):
        assert base_entity.keys() == []

    def test_define_from_entity_copies_rules(self):
        source = define(id=True)
        assert define(source).properties == source.properties


class TestExtend:
    """Tests for the extension law."""

    def test_replaces_in_place_and_appends(self):
        base = define(id=True, name=True, email=True)
        patched = base.extend({"name": {"as": "full_name"}, "created_at": True})

        assert patched.keys() == ["id", "name", "email", "created_at"]
        assert patched.get("name").output_key == "full_name"

    def test_base_is_unmodified(self):
        base = define(id=True, name=True)
        base.extend(name={"as": "full_name"}, email=True)

        assert base.keys() == ["id", "name"]
        assert base.get("name").as_ is None

    def test_false_removes_key(self):
        base = define(id=True, password_hash=True, name=True)
        assert base.extend(password_hash=False).keys() == ["id", "name"]

    def test_extend_with_entity(self):
        address = define(street=True)
        base = define(id=True, address=True)
        patch = define(address={"using": address}, name=True)

        merged = extend(base, patch)
        assert merged.keys() == ["id", "address", "name"]
        assert isinstance(merged.get("address"), NestedRule)

    def test_last_writer_wins(self):
        entity = define(id=True).extend({"id": {"as": "a"}}, id={"as": "b"})
        assert entity.get("id").output_key == "b"

    def test_extend_rejects_non_mapping(self):
        with pytest.raises(InvalidSpecification):
            define(id=True).extend(["id"])

    def test_extend_rejects_non_entity_base(self):
        with pytest.raises(InvalidSpecification):
            extend({"id": True}, {"name": True})
