"""Global fixtures for entityshelf tests."""

import pytest

from entityshelf import Collection, Record, define, reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Restore default configuration around every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def city_entity():
    return define(name=True)


@pytest.fixture
def address_entity(city_entity):
    return define(street=True, city={"using": city_entity})


@pytest.fixture
def post_entity():
    return define(
        title=True,
        draft={"if": lambda post, opts: opts.get("show_drafts")},
    )


@pytest.fixture
def user_entity(address_entity, post_entity):
    """User entity exposing a renamed field and two nested relations."""
    return define({
        "id": True,
        "name": {"as": "full_name"},
        "address": {"using": address_entity},
        "posts": {"using": post_entity},
    })


@pytest.fixture
def city():
    return Record({"id": 3, "name": "San Francisco", "population": 870000})


@pytest.fixture
def address(city):
    """Address record whose city relation is loadable but not loaded."""
    return Record(
        {"id": 7, "street": "1 Main St", "city_id": 3, "geo": "37.77,-122.41"},
        loaders={"city": lambda record: city},
    )


@pytest.fixture
def posts():
    return Collection([
        Record({"id": 10, "title": "Hello", "draft": False, "secret": "x"}),
        Record({"id": 11, "title": "Soon", "draft": True, "secret": "y"}),
    ])


@pytest.fixture
def user(address, posts):
    """User record with nothing loaded and async loaders for its relations."""

    async def load_address(record):
        return address

    async def load_posts(record):
        return posts

    return Record(
        {"id": 1, "name": "Ada Lovelace", "password_hash": "secret", "address_id": 7},
        loaders={"address": load_address, "posts": load_posts},
    )
