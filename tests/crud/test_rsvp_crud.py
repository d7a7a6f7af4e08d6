# tests/crud/test_rsvp_crud.py

import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import IntegrityError, OperationalError

from rsvp_service.crud.crud_rsvp import (
    CRUDRsvp,
    DuplicatePhoneNumberError,
    RsvpNotFoundError,
)
from rsvp_service.models.rsvp import Rsvp
from tests.utils.rsvp import make_rsvp_in, create_rsvp

rsvp_crud = CRUDRsvp()


def test_create_stores_guest_fields_without_pass(db):
    rsvp = rsvp_crud.create(db, obj_in=make_rsvp_in(comment="See you there"))

    assert rsvp.id.startswith("rsvp_")
    assert rsvp.phone_number == "5551234567"
    assert rsvp.first_name == "Ann"
    assert rsvp.last_name == "Lee"
    assert rsvp.response == "Yes"
    assert rsvp.device_type == "Android"
    assert rsvp.comment == "See you there"
    assert rsvp.wallet_pass_id is None
    assert rsvp.wallet_pass_url is None
    assert rsvp.created_at is not None


def test_create_duplicate_phone_number_is_rejected(db):
    original = create_rsvp(db, first_name="Ann", response="Yes")

    with pytest.raises(DuplicatePhoneNumberError):
        create_rsvp(db, first_name="Someone", response="No")

    stored = rsvp_crud.get_by_phone(db, phone_number="5551234567")
    assert stored.id == original.id
    assert stored.first_name == "Ann"
    assert stored.response == "Yes"


def test_create_reraises_integrity_errors_unrelated_to_phone_number():
    """
    An IntegrityError that is not a duplicate phone number must not be
    reported as a duplicate.
    """
    db_session = MagicMock()
    db_session.commit.side_effect = IntegrityError("INSERT", {}, Exception("boom"))
    # No existing RSVP for the phone number after rollback
    db_session.query.return_value.filter.return_value.first.return_value = None

    with pytest.raises(IntegrityError):
        rsvp_crud.create(db_session, obj_in=make_rsvp_in())

    db_session.rollback.assert_called_once()


def test_attach_pass_sets_both_fields(db):
    rsvp = create_rsvp(db)

    updated = rsvp_crud.attach_pass(
        db, rsvp_id=rsvp.id, pass_id="pass_1", pass_url="https://example.com/p/1"
    )

    assert updated.wallet_pass_id == "pass_1"
    assert updated.wallet_pass_url == "https://example.com/p/1"
    # Guest-entered fields are untouched
    assert updated.first_name == "Ann"
    assert updated.response == "Yes"


def test_attach_pass_twice_overwrites(db):
    rsvp = create_rsvp(db)
    rsvp_crud.attach_pass(db, rsvp_id=rsvp.id, pass_id="pass_1", pass_url="url_1")
    rsvp_crud.attach_pass(db, rsvp_id=rsvp.id, pass_id="pass_2", pass_url="url_2")

    stored = rsvp_crud.get(db, id=rsvp.id)
    assert stored.wallet_pass_id == "pass_2"
    assert stored.wallet_pass_url == "url_2"


def test_attach_pass_to_missing_rsvp_raises(db):
    with pytest.raises(RsvpNotFoundError):
        rsvp_crud.attach_pass(
            db, rsvp_id="rsvp_doesnotexist", pass_id="pass_1", pass_url="url_1"
        )


def test_get_by_phone_returns_none_for_unknown_number(db):
    create_rsvp(db)
    assert rsvp_crud.get_by_phone(db, phone_number="5550000000") is None


def test_get_multi_returns_every_rsvp(db):
    create_rsvp(db, phone_number="5550000001", first_name="Ann")
    create_rsvp(db, phone_number="5550000002", first_name="Bob", response="No")
    create_rsvp(db, phone_number="5550000003", first_name="Cat", response="Maybe")

    rsvps = rsvp_crud.get_multi(db)

    assert {r.first_name for r in rsvps} == {"Ann", "Bob", "Cat"}
    assert len(rsvp_crud.get_multi(db, limit=2)) == 2


def test_get_multi_has_no_default_cap(db):
    for n in range(501):
        create_rsvp(db, phone_number=f"555{n:07d}", first_name=f"Guest{n}")

    assert len(rsvp_crud.get_multi(db)) == 501
    assert len(rsvp_crud.get_multi(db, skip=500)) == 1


def test_device_type_is_required(db):
    db.add(
        Rsvp(
            phone_number="5551234567",
            first_name="Ann",
            last_name="Lee",
            response="Yes",
            device_type=None,
        )
    )

    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_attach_pass_rolls_back_and_reraises_database_errors():
    db_session = MagicMock()
    db_session.query.return_value.filter.return_value.first.return_value = Rsvp(
        id="rsvp_1", phone_number="5551234567"
    )
    db_session.commit.side_effect = OperationalError(
        "UPDATE", {}, Exception("database is locked")
    )

    with pytest.raises(OperationalError):
        rsvp_crud.attach_pass(
            db_session, rsvp_id="rsvp_1", pass_id="pass_1", pass_url="url_1"
        )

    db_session.rollback.assert_called_once()
    db_session.refresh.assert_not_called()


def test_attach_pass_does_not_roll_back_non_database_errors():
    db_session = MagicMock()
    db_session.query.return_value.filter.return_value.first.return_value = Rsvp(
        id="rsvp_1", phone_number="5551234567"
    )
    db_session.commit.side_effect = RuntimeError("not a database error")

    with pytest.raises(RuntimeError):
        rsvp_crud.attach_pass(
            db_session, rsvp_id="rsvp_1", pass_id="pass_1", pass_url="url_1"
        )

    db_session.rollback.assert_not_called()
