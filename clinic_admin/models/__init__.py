from .doctor import Doctor
from .user import User
from .appointment import Appointment, AppointmentStatus

__all__ = ["Doctor", "User", "Appointment", "AppointmentStatus"]
