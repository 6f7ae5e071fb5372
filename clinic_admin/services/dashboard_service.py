from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict
import logging

from ..models.doctor import Doctor
from ..models.user import User
from ..models.appointment import Appointment
from ..core.config import settings
from ..core.errors import InternalError

logger = logging.getLogger(__name__)

class DashboardService:
    def __init__(
        self,
        db: Session,
        latest_limit: int = settings.DASHBOARD_LATEST_LIMIT,
        sort_by_recency: bool = settings.DASHBOARD_SORT_BY_RECENCY,
    ):
        self.db = db
        self.latest_limit = latest_limit
        self.sort_by_recency = sort_by_recency

    def dashboard(self) -> Dict[str, Any]:
        """Counts of patients, doctors and appointments plus the latest appointments.

        By default the latest appointments are the first ``latest_limit`` rows
        in storage order, reversed. With ``sort_by_recency`` they are the
        newest by creation timestamp instead.
        """
        try:
            patients = self.db.query(func.count(User.id)).scalar()
            doctors = self.db.query(func.count(Doctor.id)).scalar()
            appointments = self.db.query(func.count(Appointment.id)).scalar()

            if self.sort_by_recency:
                latest = (
                    self.db.query(Appointment)
                    .order_by(Appointment.date.desc(), Appointment.id.desc())
                    .limit(self.latest_limit)
                    .all()
                )
            else:
                latest = (
                    self.db.query(Appointment)
                    .order_by(Appointment.id)
                    .limit(self.latest_limit)
                    .all()
                )
                latest.reverse()
        except SQLAlchemyError as e:
            logger.error(f"Admin dashboard error: {str(e)}")
            raise InternalError(str(e))

        return {
            "patients": patients,
            "doctors": doctors,
            "appointments": appointments,
            "latest_appointments": latest,
        }
