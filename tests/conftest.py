import os

# Settings are read at import time, so the environment must be ready first
os.environ["TESTING"] = "1"
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"
os.environ["ADMIN_EMAIL"] = "admin@clinic.example.com"
os.environ["ADMIN_PASSWORD"] = "AdminPassword123"
os.environ["JWT_SECRET"] = "test-jwt-secret"

import pytest
from fastapi.testclient import TestClient

from clinic_admin.main import app
from clinic_admin.core.database import Base, SessionLocal, engine
from clinic_admin.api.deps import get_asset_store
from clinic_admin.models import Doctor, User, Appointment, AppointmentStatus


class FakeAssetStore:
    """Records uploads instead of calling Cloudinary."""

    def __init__(self):
        self.uploads = []

    async def upload(self, content: bytes, filename: str) -> str:
        self.uploads.append((filename, content))
        return f"https://res.cloudinary.test/image/upload/{len(self.uploads)}/{filename}"


@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(test_db):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def asset_store():
    store = FakeAssetStore()
    app.dependency_overrides[get_asset_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_asset_store, None)


@pytest.fixture
def client(test_db, asset_store):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/v1/admin/login",
        json={"email": "admin@clinic.example.com", "password": "AdminPassword123"}
    )
    return {"atoken": response.json()["token"]}


def make_user(db, name="Patient", email=None):
    user = User(
        name=name,
        email=email or f"{name.lower().replace(' ', '.')}@mail.example.com",
        password="not-a-real-hash",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_doctor(db, name="Dr. Green", email=None, slots_booked=None):
    doctor = Doctor(
        name=name,
        email=email or f"{name.lower().replace('. ', '.').replace(' ', '.')}@clinic.example.com",
        password="not-a-real-hash",
        image="https://res.cloudinary.test/image/upload/doctor.png",
        speciality="General physician",
        degree="MBBS",
        experience="4 Years",
        about="Focused on preventive care.",
        fees=50,
        address={"line1": "17th Cross, Richmond", "line2": "Circle, Ring Road"},
        date=1700000000000,
        slots_booked=slots_booked if slots_booked is not None else {},
    )
    db.add(doctor)
    db.commit()
    db.refresh(doctor)
    return doctor


def make_appointment(db, user, doctor, slot_date="20_11_2026", slot_time="10:30 AM",
                     date=1700000000000, cancelled=False):
    appointment = Appointment(
        user_id=user.id,
        doc_id=doctor.id,
        slot_date=slot_date,
        slot_time=slot_time,
        user_data={"name": user.name, "email": user.email},
        doc_data={"name": doctor.name, "speciality": doctor.speciality},
        amount=doctor.fees,
        date=date,
        cancelled=cancelled,
        status=AppointmentStatus.CANCELLED if cancelled else AppointmentStatus.SCHEDULED,
    )
    db.add(appointment)
    db.commit()
    db.refresh(appointment)
    return appointment
