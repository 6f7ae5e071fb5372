from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, Float, BigInteger, JSON, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from ..core.database import Base

class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)

    # Relationships
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    doc_id = Column(Integer, ForeignKey("doctors.id"), nullable=False)

    # Booked slot, matching the keys of Doctor.slots_booked
    slot_date = Column(String(20), nullable=False, index=True)
    slot_time = Column(String(20), nullable=False)

    # Display snapshots taken at booking time
    user_data = Column(JSON, nullable=False, default=dict)
    doc_data = Column(JSON, nullable=False, default=dict)

    amount = Column(Float, nullable=False)
    date = Column(BigInteger, nullable=False)  # epoch milliseconds

    # State
    cancelled = Column(Boolean, default=False, nullable=False)
    status = Column(
        SQLEnum(AppointmentStatus, values_callable=lambda e: [m.value for m in e]),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
    )
    payment = Column(Boolean, default=False)
    is_completed = Column(Boolean, default=False)

    user = relationship("User", back_populates="appointments")
    doctor = relationship("Doctor", back_populates="appointments")

    def __repr__(self):
        return f"<Appointment(id={self.id}, user_id={self.user_id}, doc_id={self.doc_id}, slot='{self.slot_date} {self.slot_time}')>"
