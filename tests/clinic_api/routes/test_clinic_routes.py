from datetime import date

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from clinic_api.database import Base, build_engine, build_session_factory
from clinic_api.models.clinic import Clinic
from clinic_api.routes import clinic_routes
from clinic_api.routes.clinic_routes import get_clinic_data


@pytest.fixture
def clinic_db():
    engine = build_engine('sqlite://')
    Base.metadata.create_all(bind=engine, tables=[Clinic.__table__])

    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine, tables=[Clinic.__table__])
        engine.dispose()


def test_get_clinic_data_returns_empty_list_without_records(clinic_db) -> None:
    assert get_clinic_data(db=clinic_db) == []


def test_get_clinic_data_returns_records_in_insertion_order(clinic_db) -> None:
    clinic_db.add(Clinic(name='Zeta Clinic', address='1 Main St', date=date(2025, 3, 2), time='10:00 AM'))
    clinic_db.add(Clinic(name='Alpha Clinic', address='2 High St', date=date(2025, 3, 1), time='2pm - 4pm'))
    clinic_db.commit()

    records = get_clinic_data(db=clinic_db)

    assert [record.name for record in records] == ['Zeta Clinic', 'Alpha Clinic']
    assert records[1].address == '2 High St'
    assert records[1].date == date(2025, 3, 1)
    assert records[1].time == '2pm - 4pm'


def test_get_clinic_data_hides_store_errors(clinic_db, monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(db):
        raise OperationalError('SELECT', {}, Exception('db down'))

    monkeypatch.setattr(clinic_routes.clinics, 'list_clinics', fail)

    with pytest.raises(HTTPException) as exception_info:
        get_clinic_data(db=clinic_db)

    assert exception_info.value.status_code == 500
    assert exception_info.value.detail == 'Error fetching clinic data'
