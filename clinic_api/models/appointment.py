"""Pydantic models for appointment records and request payloads.

Field values are kept exactly as the client sent them, hence ``Any``.
"""
from typing import Any

from clinic_api.models.resource import CamelModel, Record, ResourceSchema


class Appointment(Record):
    patient_id: Any
    doctor_name: Any
    appointment_date: Any
    appointment_time: Any
    reason: Any = None
    status: Any = "scheduled"


class AppointmentCreate(CamelModel):
    # status is not accepted on create; every appointment starts "scheduled"
    patient_id: Any = None
    doctor_name: Any = None
    appointment_date: Any = None
    appointment_time: Any = None
    reason: Any = None


class AppointmentUpdate(AppointmentCreate):
    status: Any = None


APPOINTMENT_SCHEMA = ResourceSchema(
    name="appointment",
    plural="appointments",
    label="Appointment",
    record_model=Appointment,
    create_model=AppointmentCreate,
    update_model=AppointmentUpdate,
    required_fields=("patient_id", "doctor_name", "appointment_date", "appointment_time"),
    required_message="PatientId, doctorName, appointmentDate, and appointmentTime are required",
    optional_fields=("reason",),
)
