from datetime import date

import pytest
from fastapi import HTTPException

from clinic_api.database import Base, build_engine, build_session_factory
from clinic_api.models.user import User
from clinic_api.stores.users import create_user, get_user_by_email


@pytest.fixture
def user_db():
    engine = build_engine('sqlite://')
    Base.metadata.create_all(bind=engine, tables=[User.__table__])

    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


def _create(db, email: str = 'a@x.com') -> User:
    return create_user(
        db,
        email=email,
        password_hash='$2b$10$not-a-real-hash',
        whatsapp_number='+1234567890',
        dob=date(1990, 1, 1),
    )


def test_get_user_by_email_returns_none_for_unknown_email(user_db) -> None:
    assert get_user_by_email(user_db, 'nobody@x.com') is None


def test_create_user_assigns_an_id(user_db) -> None:
    user = _create(user_db)

    assert user.id is not None
    assert get_user_by_email(user_db, 'a@x.com').id == user.id


def test_create_user_rejects_duplicate_email_and_keeps_session_usable(user_db) -> None:
    _create(user_db)

    with pytest.raises(HTTPException) as exception_info:
        _create(user_db)

    assert exception_info.value.status_code == 400
    assert user_db.query(User).count() == 1
    assert _create(user_db, email='b@x.com').email == 'b@x.com'
