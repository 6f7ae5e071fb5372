from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

from ..models.appointment import AppointmentStatus

# Requests
class AdminLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class CancelAppointmentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    appointment_id: Optional[int] = Field(None, alias="appointmentId")

# Records
class DoctorResponse(BaseModel):
    """Doctor profile as shown to the admin panel. Never carries the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    image: str
    speciality: str
    degree: str
    experience: str
    about: str
    available: bool
    fees: float
    address: Dict[str, Any]
    date: int
    slots_booked: Dict[str, List[str]]

class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    doc_id: int
    slot_date: str
    slot_time: str
    user_data: Dict[str, Any]
    doc_data: Dict[str, Any]
    amount: float
    date: int
    cancelled: bool
    status: AppointmentStatus
    payment: bool
    is_completed: bool

class DashboardData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    patients: int
    doctors: int
    appointments: int
    latest_appointments: List[AppointmentResponse] = Field(alias="latestAppointments")

# Envelopes
class MessageResponse(BaseModel):
    success: bool = True
    message: str

class LoginResponse(BaseModel):
    success: bool = True
    token: str
    message: str = "Admin login successful"

class DoctorListResponse(BaseModel):
    success: bool = True
    data: List[DoctorResponse]

class AppointmentListResponse(BaseModel):
    success: bool = True
    data: List[AppointmentResponse]

class CancelAppointmentResponse(BaseModel):
    success: bool = True
    message: str = "Appointment cancelled"
    appointment: AppointmentResponse

class DashboardResponse(BaseModel):
    success: bool = True
    message: str = "Admin dashboard data"
    data: DashboardData
