"""Patient-related API routes."""
from clinic_api.api.routes.resources import build_resource_router
from clinic_api.models.patient import PATIENT_SCHEMA

router = build_resource_router(PATIENT_SCHEMA)
