"""Shared building blocks for the resource models.

Every resource is described declaratively by a ``ResourceSchema``; the
store, service layer and router are generic over it.
"""
from dataclasses import dataclass
from typing import Tuple, Type

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # Wire format is camelCase; request payloads are read by alias only
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False)


class Record(CamelModel):
    """Fields managed by the store itself, never by the caller."""
    # The store builds records from snake_case field names
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ResourceSchema:
    name: str                     # "appointment"
    plural: str                   # "appointments"
    label: str                    # "Appointment"
    record_model: Type[Record]
    create_model: Type[CamelModel]
    update_model: Type[CamelModel]
    required_fields: Tuple[str, ...]
    required_message: str
    # Stored as null unless the caller sends a truthy value
    optional_fields: Tuple[str, ...] = ()

    @property
    def service_name(self) -> str:
        return f"{self.name}-service"

    @property
    def route_prefix(self) -> str:
        return f"/api/{self.plural}"
