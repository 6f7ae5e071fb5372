from .admin import (
    AdminLogin,
    CancelAppointmentRequest,
    DoctorResponse,
    AppointmentResponse,
    DashboardData,
    MessageResponse,
    LoginResponse,
    DoctorListResponse,
    AppointmentListResponse,
    CancelAppointmentResponse,
    DashboardResponse,
)

__all__ = [
    "AdminLogin",
    "CancelAppointmentRequest",
    "DoctorResponse",
    "AppointmentResponse",
    "DashboardData",
    "MessageResponse",
    "LoginResponse",
    "DoctorListResponse",
    "AppointmentListResponse",
    "CancelAppointmentResponse",
    "DashboardResponse",
]
