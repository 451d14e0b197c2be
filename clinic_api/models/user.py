"""User model definitions."""

from sqlalchemy import Column, Date, Integer, String
from clinic_api.database import Base


class User(Base):
    """Represents a registered user."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    whatsapp_number = Column(String, nullable=False)
    dob = Column(Date, nullable=False)
