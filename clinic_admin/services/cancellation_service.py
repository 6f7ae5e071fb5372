from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Dict, List, Optional
import logging

from ..models.doctor import Doctor
from ..models.appointment import Appointment, AppointmentStatus
from ..core.errors import AlreadyCancelled, InternalError, MissingInput, NotFound

logger = logging.getLogger(__name__)

def release_slot(
    slots_booked: Optional[Dict[str, List[str]]],
    slot_date: str,
    slot_time: str,
) -> Dict[str, List[str]]:
    """Return a copy of ``slots_booked`` with every ``slot_time`` removed from ``slot_date``.

    Other dates are left untouched and a date whose list becomes empty is
    kept as an empty list.
    """
    slots = {date: list(times) for date, times in (slots_booked or {}).items()}
    if slot_date in slots:
        slots[slot_date] = [time for time in slots[slot_date] if time != slot_time]
    return slots

class CancellationService:
    def __init__(self, db: Session):
        self.db = db

    def cancel(self, appointment_id: Optional[int]) -> Appointment:
        """Cancel an appointment and free the doctor's slot in one transaction."""
        if not appointment_id:
            raise MissingInput("Appointment ID is required")

        try:
            appointment = self.db.get(Appointment, appointment_id, with_for_update=True)

            if not appointment:
                raise NotFound("Appointment not found")

            if appointment.cancelled:
                raise AlreadyCancelled()

            appointment.cancelled = True
            appointment.status = AppointmentStatus.CANCELLED

            doctor = self.db.get(Doctor, appointment.doc_id, with_for_update=True)
            if doctor:
                doctor.slots_booked = release_slot(
                    doctor.slots_booked, appointment.slot_date, appointment.slot_time
                )
            else:
                logger.warning(
                    f"Appointment {appointment.id} references missing doctor {appointment.doc_id}"
                )

            self.db.commit()
            self.db.refresh(appointment)
        except (NotFound, AlreadyCancelled):
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Cancel appointment error: {str(e)}")
            raise InternalError(str(e))

        logger.info(
            f"Cancelled appointment {appointment.id}, released {appointment.slot_date} "
            f"{appointment.slot_time} for doctor {appointment.doc_id}"
        )
        return appointment
