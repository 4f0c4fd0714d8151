"""
API dependencies.

Provides the FastAPI dependency that hands each route the resource
service owned by the running application.
"""

from fastapi import Request

from clinic_api.services.resource_service import ResourceService


def get_resource_service(request: Request) -> ResourceService:
    """
    Return the service stored on ``app.state`` by ``create_app``.

    Each application instance owns exactly one service (and store), so
    two apps in the same process never see each other's records.
    """
    return request.app.state.resource_service
