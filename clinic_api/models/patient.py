"""Pydantic models for patient records.

Use these for request/response validation.
"""
from typing import Any

from clinic_api.models.resource import CamelModel, Record, ResourceSchema


class Patient(Record):
    name: Any
    email: Any
    phone: Any = None
    date_of_birth: Any = None
    address: Any = None


class PatientCreate(CamelModel):
    name: Any = None
    email: Any = None
    phone: Any = None
    date_of_birth: Any = None
    address: Any = None


class PatientUpdate(PatientCreate):
    pass


PATIENT_SCHEMA = ResourceSchema(
    name="patient",
    plural="patients",
    label="Patient",
    record_model=Patient,
    create_model=PatientCreate,
    update_model=PatientUpdate,
    required_fields=("name", "email"),
    required_message="Name and email are required",
    optional_fields=("phone", "date_of_birth", "address"),
)
