import logging
from datetime import date

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clinic_api.core.errors import ServerErrorException
from clinic_api.database import get_db
from clinic_api.stores import clinics

router = APIRouter(tags=['clinic'])

logger = logging.getLogger(__name__)


class ClinicResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    date: date
    time: str


@router.get('/GetData', response_model=list[ClinicResponse])
def get_clinic_data(db: Session = Depends(get_db)):
    try:
        records = clinics.list_clinics(db)
    except SQLAlchemyError as exc:
        logger.exception('Error fetching clinic data')
        raise ServerErrorException('Error fetching clinic data') from exc

    logger.debug('Fetched %d clinics', len(records))
    return [ClinicResponse.model_validate(record) for record in records]
