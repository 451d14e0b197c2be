"""Clinic model definitions."""

from sqlalchemy import Column, Date, Integer, String
from clinic_api.database import Base


class Clinic(Base):
    """Represents a clinic session. Rows are maintained outside this service."""
    __tablename__ = "clinic"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    time = Column(String, nullable=False)
