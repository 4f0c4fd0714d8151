"""Business logic / service layer for resource operations.

Maps CRUD intents onto a ``ResourceStore`` and shapes the outcome with
``response_builder``. Failures are raised as ``ServiceError`` subclasses
and rendered by the exception handlers.
"""
import logging
from typing import Any, Dict, Optional

from clinic_api.core.exceptions import NotFoundError, ValidationError
from clinic_api.models.resource import ResourceSchema
from clinic_api.services import response_builder
from clinic_api.services.logger import log_event
from clinic_api.services.resource_store import ResourceStore, is_truthy

logger = logging.getLogger(__name__)


class ResourceService:
    def __init__(self, schema: ResourceSchema, store: Optional[ResourceStore] = None):
        self.schema = schema
        self.store = store if store is not None else ResourceStore(schema.record_model)

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.schema.label} not found")

    def _get_or_raise(self, record_id: str):
        record = self.store.find_by_id(record_id)
        if record is None:
            raise self._not_found()
        return record

    def list(self) -> dict:
        records, count = self.store.list_all()
        return response_builder.with_collection(records, count)

    def get(self, record_id: str) -> dict:
        return response_builder.with_data(self._get_or_raise(record_id))

    def list_where(self, field: str, value: Any) -> dict:
        """Exact-match filter on one record field, e.g. appointments by patient_id."""
        records, count = self.store.find_by_predicate(lambda r: getattr(r, field) == value)
        return response_builder.with_collection(records, count)

    def create(self, payload: Dict[str, Any]) -> dict:
        fields = self.schema.create_model.model_validate(payload)
        missing = [f for f in self.schema.required_fields if not is_truthy(getattr(fields, f))]
        if missing:
            logger.info("Rejected %s create, missing %s", self.schema.name, ", ".join(missing))
            raise ValidationError(self.schema.required_message)

        values = fields.model_dump()
        for field in self.schema.optional_fields:
            if not is_truthy(values.get(field)):
                values[field] = None

        record = self.store.insert(values)
        log_event(f"{self.schema.name}_created", record.model_dump(by_alias=True))
        return response_builder.with_data(record, f"{self.schema.label} created successfully")

    def update(self, record_id: str, payload: Dict[str, Any]) -> dict:
        changes = self.schema.update_model.model_validate(payload)
        record = self.store.update(record_id, changes.model_dump(exclude_unset=True))
        if record is None:
            raise self._not_found()

        log_event(f"{self.schema.name}_updated", record.model_dump(by_alias=True))
        return response_builder.with_data(record, f"{self.schema.label} updated successfully")

    def delete(self, record_id: str) -> dict:
        if not self.store.remove(record_id):
            raise self._not_found()

        log_event(f"{self.schema.name}_deleted", {"id": record_id})
        return response_builder.with_message(f"{self.schema.label} deleted successfully")
