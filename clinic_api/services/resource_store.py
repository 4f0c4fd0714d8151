"""In-memory record store shared by the appointment and patient services.

One ``ResourceStore`` owns the authoritative collection for one resource
type. It assigns ids and timestamps; callers only ever supply the
resource's own fields. Nothing is persisted: the store starts empty and
is gone when the process exits.
"""
import logging
import math
import uuid
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from clinic_api.models.resource import Record
from clinic_api.services.time_utils import utc_now_iso

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)

MANAGED_FIELDS = ("id", "created_at", "updated_at")


def is_truthy(value: Any) -> bool:
    """Truthiness as a JSON client sees it.

    Empty arrays and objects still count as values; null, false, 0, NaN
    and "" do not.
    """
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


class ResourceStore(Generic[RecordT]):
    def __init__(self, record_model: Type[RecordT]):
        self._record_model = record_model
        # dicts keep insertion order, which is the collection order
        self._records: Dict[str, RecordT] = {}

    def __len__(self) -> int:
        return len(self._records)

    def _new_id(self) -> str:
        record_id = str(uuid.uuid4())
        while record_id in self._records:
            record_id = str(uuid.uuid4())
        return record_id

    def insert(self, fields: Dict[str, Any]) -> RecordT:
        """Create a record from already-validated fields and append it."""
        fields = {k: v for k, v in fields.items() if k not in MANAGED_FIELDS}
        now = utc_now_iso()
        record = self._record_model(id=self._new_id(), created_at=now, updated_at=now, **fields)
        self._records[record.id] = record
        logger.debug("Inserted %s %s", self._record_model.__name__, record.id)
        return record

    def list_all(self) -> Tuple[List[RecordT], int]:
        records = list(self._records.values())
        return records, len(records)

    def find_by_id(self, record_id: str) -> Optional[RecordT]:
        return self._records.get(record_id)

    def find_by_predicate(self, predicate: Callable[[RecordT], bool]) -> Tuple[List[RecordT], int]:
        matches = [r for r in self._records.values() if predicate(r)]
        return matches, len(matches)

    def update(self, record_id: str, changes: Dict[str, Any]) -> Optional[RecordT]:
        """Merge ``changes`` into the record and refresh ``updated_at``.

        Only truthy values overwrite; a falsy value keeps whatever the
        record already holds, so a field cannot be cleared this way.
        Returns None when no record has ``record_id``.
        """
        current = self._records.get(record_id)
        if current is None:
            return None

        merged = {
            field: value
            for field, value in changes.items()
            if field not in MANAGED_FIELDS and field in self._record_model.model_fields and is_truthy(value)
        }
        merged["updated_at"] = utc_now_iso()

        updated = current.model_copy(update=merged)
        self._records[record_id] = updated
        return updated

    def remove(self, record_id: str) -> bool:
        if record_id not in self._records:
            return False
        del self._records[record_id]
        logger.debug("Removed %s %s", self._record_model.__name__, record_id)
        return True

    def clear(self):
        self._records.clear()
