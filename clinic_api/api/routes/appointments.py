"""Appointment API routes."""
from fastapi import Depends

from clinic_api.api.deps import get_resource_service
from clinic_api.api.routes.resources import build_resource_router
from clinic_api.models.appointment import APPOINTMENT_SCHEMA
from clinic_api.services.resource_service import ResourceService

router = build_resource_router(APPOINTMENT_SCHEMA)


@router.get("/patient/{patient_id}")
async def list_patient_appointments(patient_id: str, service: ResourceService = Depends(get_resource_service)):
    """All appointments booked for one patient id.

    The patient service is never consulted; an unknown id simply has no
    appointments.
    """
    return service.list_where("patient_id", patient_id)
