"""Tests for relation auto-load detection."""

from entityshelf import Collection, Record, define, detect_relations_to_load


class TestDetectRelations:
    """Tests for detect_relations_to_load."""

    def test_single_missing_relation(self, address):
        user = Record({"id": 1}, loaders={"address": lambda r: address})
        entity = define(id=True, address={"using": define(street=True)})

        assert detect_relations_to_load(entity, user) == ["address"]

    def test_nested_paths_below_unloaded_relation(self, user, user_entity):
        assert detect_relations_to_load(user_entity, user) == [
            "address",
            "address.city",
            "posts",
        ]

    def test_nested_path_on_loaded_relation(self, address, address_entity):
        user = Record({"id": 1}, relations={"address": address})
        entity = define(address={"using": address_entity})

        assert detect_relations_to_load(entity, user) == ["address.city"]
        assert detect_relations_to_load(address_entity, address) == ["city"]

    def test_nothing_missing(self, address, city, address_entity):
        address.set_relation("city", city)
        user = Record({"id": 1}, relations={"address": address})
        entity = define(address={"using": address_entity})

        assert detect_relations_to_load(entity, user) == []

    def test_unloadable_relation_is_skipped(self, address_entity):
        user = Record({"id": 1})
        entity = define(address={"using": address_entity})

        assert detect_relations_to_load(entity, user) == []

    def test_loaded_empty_relation_is_not_descended(self, address_entity):
        user = Record({"id": 1}, relations={"address": None, "friends": Collection([])})
        entity = define(address={"using": address_entity}, friends={"using": address_entity})

        assert detect_relations_to_load(entity, user) == []

    def test_collection_relation_uses_first_model(self, address_entity):
        first = Record({"id": 1}, loaders={"city": lambda r: None})
        second = Record({"id": 2})
        user = Record({"id": 1}, relations={"addresses": Collection([first, second])})
        entity = define(addresses={"using": address_entity})

        assert detect_relations_to_load(entity, user) == ["addresses.city"]

    def test_plain_data_and_missing_entity(self, user_entity):
        assert detect_relations_to_load(user_entity, {"address": {}}) == []
        assert detect_relations_to_load(None, Record()) == []

    def test_has_relation_defaults_to_attribute_lookup(self, address_entity):
        class Account(Record):
            def has_relation(self, name):
                return super(Record, self).has_relation(name)

            def owner(self):
                return None

        account = Account({"id": 1})
        entity = define(owner={"using": address_entity}, billing={"using": address_entity})

        assert detect_relations_to_load(entity, account) == ["owner", "owner.city"]

    def test_non_empty_attribute_marks_relation_missing(self):
        user = Record({"id": 1, "address": {"street": "x"}, "manager": None})
        entity = define(
            id=True,
            address={"using": define(street=True)},
            manager={"using": define(id=True)},
        )

        assert detect_relations_to_load(entity, user) == ["address"]

    def test_model_methods_are_not_relations(self, address_entity):
        class Account(Record):
            def has_relation(self, name):
                return super(Record, self).has_relation(name)

        account = Account({"id": 1})
        entity = define(relations={"using": address_entity}, load={"using": address_entity})

        assert not account.has_relation("relations")
        assert detect_relations_to_load(entity, account) == []
