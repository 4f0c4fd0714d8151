import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clinic_api.api.exception_handlers import register_exception_handlers
from clinic_api.api.middleware import AccessLogMiddleware, InternalFaultMiddleware, SecurityHeadersMiddleware
from clinic_api.api.routes import appointments, patients
from clinic_api.core.config import settings
from clinic_api.models.appointment import APPOINTMENT_SCHEMA
from clinic_api.models.patient import PATIENT_SCHEMA
from clinic_api.services.resource_service import ResourceService
from clinic_api.services.time_utils import utc_now_iso

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# resource name -> (schema, router)
RESOURCES = {
    "appointments": (APPOINTMENT_SCHEMA, appointments.router),
    "patients": (PATIENT_SCHEMA, patients.router),
}


def create_app(resource: str = None, service: ResourceService = None) -> FastAPI:
    """Build the service for one resource ("appointments" or "patients").

    Every call gets its own empty store unless ``service`` is given.
    """
    resource = resource or settings.SERVICE
    if resource not in RESOURCES:
        raise ValueError(f"Unknown resource {resource!r}, expected one of {sorted(RESOURCES)}")
    schema, router = RESOURCES[resource]

    app = FastAPI(title=f"{schema.label} Service")
    app.state.resource_service = service if service is not None else ResourceService(schema)

    # Last added is outermost
    app.add_middleware(InternalFaultMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.on_event("startup")
    def startup():
        logger.info("%s Service ready", schema.label)
        logger.info("Environment: %s", settings.ENVIRONMENT)

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": schema.service_name,
            "timestamp": utc_now_iso(),
        }

    app.include_router(router)
    return app


# Selected by SERVICE, for `uvicorn clinic_api.main:app`
app = create_app()


def run(resource: str = None):
    service_app = create_app(resource)
    logger.info("%s running on port %d", service_app.title, settings.PORT)
    uvicorn.run(service_app, host=settings.HOST, port=settings.PORT)


def run_appointments():
    run("appointments")


def run_patients():
    run("patients")


if __name__ == "__main__":
    run()
