from sqlalchemy import Column, Integer, String, Boolean, Text, Float, BigInteger, JSON
from sqlalchemy.orm import relationship

from ..core.database import Base

class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)

    # Credentials
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash

    # Profile
    name = Column(String(100), nullable=False)
    image = Column(String(500), nullable=False)
    speciality = Column(String(100), nullable=False)
    degree = Column(String(100), nullable=False)
    experience = Column(String(50), nullable=False)
    about = Column(Text, nullable=False)
    available = Column(Boolean, default=True)
    fees = Column(Float, nullable=False)
    address = Column(JSON, nullable=False)

    # Creation timestamp in epoch milliseconds
    date = Column(BigInteger, nullable=False)

    # slot_date -> [slot_time, ...]
    slots_booked = Column(JSON, nullable=False, default=dict)

    # Relationships
    appointments = relationship("Appointment", back_populates="doctor")

    def __repr__(self):
        return f"<Doctor(id={self.id}, name='{self.name}', speciality='{self.speciality}')>"
