from sqlalchemy.orm import Session

from clinic_api.models.clinic import Clinic


def list_clinics(db: Session) -> list[Clinic]:
    return db.query(Clinic).order_by(Clinic.id.asc()).all()
