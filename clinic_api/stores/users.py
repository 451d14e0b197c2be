import logging
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from clinic_api.core.errors import DuplicateEmailException
from clinic_api.models.user import User

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(
    db: Session,
    *,
    email: str,
    password_hash: str,
    whatsapp_number: str,
    dob: date,
) -> User:
    """Insert a user, relying on the unique index on ``users.email``.

    A concurrent registration can pass any earlier existence check, so the
    constraint violation at commit time is what decides a duplicate.
    """
    user = User(
        email=email,
        password=password_hash,
        whatsapp_number=whatsapp_number,
        dob=dob,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Unique constraint rejected registration for an existing email")
        raise DuplicateEmailException() from exc

    db.refresh(user)
    return user
