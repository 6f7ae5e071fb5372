from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session
from typing import Optional

from ...core.database import get_db
from ...api.deps import get_asset_store, get_auth_service, require_admin
from ...services.auth_service import AdminAuthService
from ...services.asset_store import CloudinaryAssetStore
from ...services.doctor_service import DoctorService
from ...services.query_service import QueryService
from ...services.cancellation_service import CancellationService
from ...services.dashboard_service import DashboardService
from ...schemas.admin import (
    AdminLogin, CancelAppointmentRequest, MessageResponse, LoginResponse,
    DoctorListResponse, AppointmentListResponse, CancelAppointmentResponse,
    DashboardResponse, DashboardData, DoctorResponse, AppointmentResponse
)

router = APIRouter(prefix="/admin", tags=["Admin"])

@router.post("/add-doctor", response_model=MessageResponse)
async def add_doctor(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    speciality: Optional[str] = Form(None),
    degree: Optional[str] = Form(None),
    experience: Optional[str] = Form(None),
    about: Optional[str] = Form(None),
    fees: Optional[float] = Form(None),
    address: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    asset_store: CloudinaryAssetStore = Depends(get_asset_store),
    _: str = Depends(require_admin)
):
    """Register a new doctor with a profile image."""
    image_content = await image.read() if image else None

    doctor_service = DoctorService(db, asset_store)
    await doctor_service.add_doctor(
        name=name,
        email=email,
        password=password,
        speciality=speciality,
        degree=degree,
        experience=experience,
        about=about,
        fees=fees,
        address=address,
        image_content=image_content,
        image_filename=image.filename if image else None,
    )

    return MessageResponse(message="Doctor added successfully")

@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: AdminLogin,
    auth_service: AdminAuthService = Depends(get_auth_service)
):
    """Authenticate the admin and return an access token."""
    token = auth_service.login(login_data.email, login_data.password)
    return LoginResponse(token=token)

@router.get("/all-doctors", response_model=DoctorListResponse)
async def all_doctors(
    db: Session = Depends(get_db),
    _: str = Depends(require_admin)
):
    """List all doctors."""
    return DoctorListResponse(data=[
        DoctorResponse.model_validate(doctor)
        for doctor in QueryService(db).list_doctors()
    ])

@router.get("/appointments", response_model=AppointmentListResponse)
async def admin_appointments(
    db: Session = Depends(get_db),
    _: str = Depends(require_admin)
):
    """List all appointments."""
    return AppointmentListResponse(data=[
        AppointmentResponse.model_validate(appointment)
        for appointment in QueryService(db).list_appointments()
    ])

@router.post("/cancel-appointment", response_model=CancelAppointmentResponse)
async def appointment_cancel(
    cancel_data: CancelAppointmentRequest,
    db: Session = Depends(get_db),
    _: str = Depends(require_admin)
):
    """Cancel an appointment and release the doctor's slot."""
    appointment = CancellationService(db).cancel(cancel_data.appointment_id)
    return CancelAppointmentResponse(
        appointment=AppointmentResponse.model_validate(appointment)
    )

@router.get("/dashboard", response_model=DashboardResponse)
async def admin_dashboard(
    db: Session = Depends(get_db),
    _: str = Depends(require_admin)
):
    """Summary counts and latest appointments."""
    summary = DashboardService(db).dashboard()
    return DashboardResponse(data=DashboardData(
        patients=summary["patients"],
        doctors=summary["doctors"],
        appointments=summary["appointments"],
        latest_appointments=[
            AppointmentResponse.model_validate(appointment)
            for appointment in summary["latest_appointments"]
        ],
    ))
