from sqlalchemy.orm import Session, defer
from sqlalchemy.exc import SQLAlchemyError
from typing import List
import logging

from ..models.doctor import Doctor
from ..models.appointment import Appointment
from ..core.errors import InternalError

logger = logging.getLogger(__name__)

class QueryService:
    """Read-only listings for the admin panel."""

    def __init__(self, db: Session):
        self.db = db

    def list_doctors(self) -> List[Doctor]:
        """All doctors, without loading the password hash."""
        try:
            return (
                self.db.query(Doctor)
                .options(defer(Doctor.password, raiseload=True))
                .order_by(Doctor.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error in list_doctors: {str(e)}")
            raise InternalError(str(e))

    def list_appointments(self) -> List[Appointment]:
        try:
            return self.db.query(Appointment).order_by(Appointment.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error in list_appointments: {str(e)}")
            raise InternalError(str(e))
