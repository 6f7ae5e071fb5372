from sqlalchemy import Column, Integer, String, JSON
from sqlalchemy.orm import relationship

from ..core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    image = Column(String(500), nullable=True)
    address = Column(JSON, nullable=True)
    gender = Column(String(20), default="Not Selected")
    dob = Column(String(20), default="Not Selected")
    phone = Column(String(20), default="0000000000")

    # Relationships
    appointments = relationship("Appointment", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
