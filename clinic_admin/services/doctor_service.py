from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from email_validator import validate_email, EmailNotValidError
from typing import Any, Dict, Optional
import json
import logging
import time

from ..models.doctor import Doctor
from ..core.security import get_password_hash
from ..core.errors import (
    DuplicateEmail, InternalError, InvalidAddress, InvalidEmail,
    InvalidFees, MissingInput, WeakPassword
)
from .asset_store import CloudinaryAssetStore

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

def parse_address(raw: str) -> Dict[str, Any]:
    """Decode the serialized address field into a mapping."""
    try:
        address = json.loads(raw)
    except (TypeError, ValueError):
        raise InvalidAddress()

    if not isinstance(address, dict):
        raise InvalidAddress()

    return address

class DoctorService:
    def __init__(self, db: Session, asset_store: CloudinaryAssetStore):
        self.db = db
        self.asset_store = asset_store

    async def add_doctor(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        speciality: Optional[str],
        degree: Optional[str],
        experience: Optional[str],
        about: Optional[str],
        fees: Optional[float],
        address: Optional[str],
        image_content: Optional[bytes],
        image_filename: Optional[str] = None,
    ) -> int:
        """Validate and register a new doctor, returning its id."""
        required = [name, email, password, speciality, degree, experience, about, address]
        if not all(required) or fees is None or not image_content:
            raise MissingInput()

        try:
            validate_email(email, check_deliverability=False, test_environment=True)
        except EmailNotValidError:
            raise InvalidEmail()

        if len(password) < MIN_PASSWORD_LENGTH:
            raise WeakPassword()

        if fees <= 0:
            raise InvalidFees()

        parsed_address = parse_address(address)

        if self._email_taken(email):
            raise DuplicateEmail()

        try:
            hashed_password = get_password_hash(password)
        except ValueError as e:
            logger.error(f"Error in add_doctor: {str(e)}")
            raise InternalError(str(e))

        image_url = await self.asset_store.upload(image_content, image_filename or "doctor-image")

        new_doctor = Doctor(
            name=name,
            email=email,
            image=image_url,
            password=hashed_password,
            speciality=speciality,
            degree=degree,
            experience=experience,
            about=about,
            fees=fees,
            address=parsed_address,
            date=int(time.time() * 1000),
            slots_booked={},
        )

        try:
            self.db.add(new_doctor)
            self.db.commit()
            self.db.refresh(new_doctor)
        except IntegrityError as e:
            self.db.rollback()
            if self._email_taken(email):
                logger.warning(f"Concurrent registration for {email} lost the race")
                raise DuplicateEmail()
            logger.error(f"Error in add_doctor: {str(e)}")
            raise InternalError(str(e))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error in add_doctor: {str(e)}")
            raise InternalError(str(e))

        logger.info(f"Added doctor {new_doctor.id} ({new_doctor.speciality})")
        return new_doctor.id

    def _email_taken(self, email: str) -> bool:
        try:
            return self.db.query(Doctor.id).filter(Doctor.email == email).first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error in add_doctor: {str(e)}")
            raise InternalError(str(e))
