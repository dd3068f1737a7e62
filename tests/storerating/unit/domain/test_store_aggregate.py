"""Unit tests for the Store aggregate."""

import pytest

from storerating.domain.shared import ValidationError
from storerating.domain.store import Store

VALID_NAME = "Corner Grocery and Fresh Produce"


class TestStoreCreation:
    def test_email_is_lower_cased(self):
        store = Store.create(VALID_NAME, "Corner@Example.COM")

        assert store.email == "corner@example.com"
        assert store.id is None
        assert store.owner_id is None

    @pytest.mark.parametrize("length", [20, 60])
    def test_name_boundaries_are_inclusive(self, length):
        Store.create("x" * length, "s@example.com")

    @pytest.mark.parametrize("length", [19, 61])
    def test_name_outside_range(self, length):
        with pytest.raises(ValidationError, match="Name must be 20-60 characters"):
            Store.create("x" * length, "s@example.com")

    def test_address_limit(self):
        Store.create(VALID_NAME, "s@example.com", address="a" * 400)

        with pytest.raises(ValidationError, match="at most 400"):
            Store.create(VALID_NAME, "s@example.com", address="a" * 401)


class TestStoreUpdate:
    def test_partial_update_keeps_other_fields(self, owned_store):
        owned_store.update(address="2 Side Street")

        assert owned_store.address == "2 Side Street"
        assert owned_store.name == VALID_NAME
        assert owned_store.owner_id == 10

    def test_update_validates_name(self, owned_store):
        with pytest.raises(ValidationError):
            owned_store.update(name="too short")

    def test_reassign_owner(self, owned_store):
        owned_store.update(owner_id=11)

        assert owned_store.is_owned_by(11)
        assert not owned_store.is_owned_by(10)

    def test_clear_owner(self, owned_store):
        owned_store.update(clear_owner=True)

        assert owned_store.owner_id is None
        assert not owned_store.is_owned_by(10)


def test_unowned_store_is_owned_by_nobody():
    store = Store.create(VALID_NAME, "s@example.com")

    assert not store.is_owned_by(1)
