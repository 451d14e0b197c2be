import logging
from datetime import date

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clinic_api.auth import jwt_handler
from clinic_api.auth.dependencies import get_config
from clinic_api.auth.passwords import hash_password, verify_password
from clinic_api.core.config import AppConfig
from clinic_api.core.errors import (
    DuplicateEmailException,
    InvalidCredentialException,
    ServerErrorException,
    UserNotFoundException,
)
from clinic_api.database import get_db
from clinic_api.stores import users

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)

SIGNUP_ERROR = 'Error registering user'
SIGNIN_ERROR = 'An error occurred'


class SignUpRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    whatsapp_number: str = Field(alias='whatsappNumber', min_length=1)
    dob: date


class SignInRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    email: str
    password: str
    whatsapp_number: str = Field(alias='whatsappNumber')
    dob: date


class SignUpResponse(BaseModel):
    msg: str
    user: UserResponse


class SignInResponse(BaseModel):
    msg: str
    token: str


@router.post('/signup', response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
def signup(data: SignUpRequest, db: Session = Depends(get_db)):
    try:
        if users.get_user_by_email(db, data.email) is not None:
            logger.info('Registration rejected: email already exists')
            raise DuplicateEmailException()

        user = users.create_user(
            db,
            email=data.email,
            password_hash=hash_password(data.password),
            whatsapp_number=data.whatsapp_number,
            dob=data.dob,
        )
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Registration failed while writing to the user store')
        raise ServerErrorException(SIGNUP_ERROR) from exc

    logger.info('Registered user %s', user.id)
    return SignUpResponse(
        msg='User registered successfully',
        user=UserResponse(
            id=user.id,
            email=user.email,
            password=user.password,
            whatsapp_number=user.whatsapp_number,
            dob=user.dob,
        ),
    )


@router.post('/signin', response_model=SignInResponse)
def signin(
    data: SignInRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_config),
):
    try:
        user = users.get_user_by_email(db, data.email)
    except SQLAlchemyError as exc:
        logger.exception('Sign-in failed while reading the user store')
        raise ServerErrorException(SIGNIN_ERROR) from exc

    if user is None:
        raise UserNotFoundException()

    if not verify_password(data.password, user.password):
        logger.info('Sign-in rejected for user %s: invalid password', user.id)
        raise InvalidCredentialException()

    token = jwt_handler.create_access_token(config, user_id=user.id, email=user.email)
    logger.info('Issued access token for user %s', user.id)
    return SignInResponse(msg='Sign In Successful', token=token)
