import time
import unittest

from clinic_api.models.appointment import Appointment
from clinic_api.models.patient import Patient
from clinic_api.services.resource_store import ResourceStore, is_truthy


def _patient_fields(**overrides):
    fields = {"name": "Ada Lovelace", "email": "ada@example.com"}
    fields.update(overrides)
    return fields


class TestIsTruthy(unittest.TestCase):
    def test_empty_values_are_falsy(self):
        for value in (None, "", 0, 0.0, False, float("nan")):
            self.assertFalse(is_truthy(value), value)

    def test_containers_count_as_values(self):
        self.assertTrue(is_truthy([]))
        self.assertTrue(is_truthy({}))
        self.assertTrue(is_truthy("x"))
        self.assertTrue(is_truthy(1))


class TestResourceStore(unittest.TestCase):
    def setUp(self):
        self.store = ResourceStore(Patient)

    def test_insert_assigns_id_and_timestamps(self):
        record = self.store.insert(_patient_fields())
        self.assertTrue(record.id)
        self.assertEqual(record.created_at, record.updated_at)
        self.assertTrue(record.created_at.endswith("Z"))
        self.assertEqual(record.name, "Ada Lovelace")

    def test_insert_applies_optional_defaults(self):
        record = self.store.insert(_patient_fields())
        self.assertIsNone(record.phone)
        self.assertIsNone(record.date_of_birth)
        self.assertIsNone(record.address)

    def test_insert_ignores_managed_fields(self):
        record = self.store.insert(_patient_fields(id="chosen-by-caller", created_at="1999"))
        self.assertNotEqual(record.id, "chosen-by-caller")
        self.assertNotEqual(record.created_at, "1999")

    def test_appointment_defaults(self):
        store = ResourceStore(Appointment)
        record = store.insert({
            "patient_id": "p1",
            "doctor_name": "Dr. X",
            "appointment_date": "2024-01-01",
            "appointment_time": "10:00",
        })
        self.assertEqual(record.status, "scheduled")
        self.assertIsNone(record.reason)

    def test_ids_are_unique(self):
        ids = {self.store.insert(_patient_fields()).id for _ in range(50)}
        self.assertEqual(len(ids), 50)

    def test_list_all_empty(self):
        records, count = self.store.list_all()
        self.assertEqual(records, [])
        self.assertEqual(count, 0)

    def test_list_all_keeps_insertion_order(self):
        names = ["first", "second", "third"]
        for name in names:
            self.store.insert(_patient_fields(name=name))
        records, count = self.store.list_all()
        self.assertEqual(count, 3)
        self.assertEqual([r.name for r in records], names)

    def test_find_by_id(self):
        record = self.store.insert(_patient_fields())
        self.assertEqual(self.store.find_by_id(record.id), record)
        self.assertIsNone(self.store.find_by_id("missing"))
        self.assertIsNone(self.store.find_by_id(record.id.upper()))

    def test_find_by_predicate(self):
        self.store.insert(_patient_fields(name="a", phone="1"))
        self.store.insert(_patient_fields(name="b"))
        self.store.insert(_patient_fields(name="c", phone="1"))

        records, count = self.store.find_by_predicate(lambda r: r.phone == "1")
        self.assertEqual(count, 2)
        self.assertEqual([r.name for r in records], ["a", "c"])

        records, count = self.store.find_by_predicate(lambda r: r.phone == "2")
        self.assertEqual((records, count), ([], 0))

    def test_update_merges_truthy_values(self):
        record = self.store.insert(_patient_fields(phone="555"))
        updated = self.store.update(record.id, {"name": "Grace", "phone": "", "email": None})
        self.assertEqual(updated.name, "Grace")
        self.assertEqual(updated.phone, "555")
        self.assertEqual(updated.email, "ada@example.com")

    def test_update_never_touches_identity(self):
        record = self.store.insert(_patient_fields())
        updated = self.store.update(record.id, {"id": "other", "created_at": "1999"})
        self.assertEqual(updated.id, record.id)
        self.assertEqual(updated.created_at, record.created_at)
        self.assertIsNotNone(self.store.find_by_id(record.id))

    def test_update_refreshes_updated_at(self):
        record = self.store.insert(_patient_fields())
        time.sleep(0.01)
        updated = self.store.update(record.id, {})
        self.assertGreater(updated.updated_at, record.updated_at)
        self.assertEqual(updated.created_at, record.created_at)

    def test_update_missing(self):
        self.assertIsNone(self.store.update("missing", {"name": "x"}))
        self.assertEqual(len(self.store), 0)

    def test_update_keeps_position(self):
        first = self.store.insert(_patient_fields(name="a"))
        self.store.insert(_patient_fields(name="b"))
        self.store.update(first.id, {"name": "z"})
        records, _ = self.store.list_all()
        self.assertEqual([r.name for r in records], ["z", "b"])

    def test_remove(self):
        a = self.store.insert(_patient_fields(name="a"))
        b = self.store.insert(_patient_fields(name="b"))
        c = self.store.insert(_patient_fields(name="c"))

        self.assertTrue(self.store.remove(b.id))
        self.assertFalse(self.store.remove(b.id))
        self.assertIsNone(self.store.find_by_id(b.id))

        records, count = self.store.list_all()
        self.assertEqual(count, 2)
        self.assertEqual([r.id for r in records], [a.id, c.id])

    def test_creates_minus_deletes(self):
        created = [self.store.insert(_patient_fields()) for _ in range(7)]
        for record in created[:3]:
            self.store.remove(record.id)
        _, count = self.store.list_all()
        self.assertEqual(count, 4)

    def test_clear(self):
        self.store.insert(_patient_fields())
        self.store.clear()
        self.assertEqual(self.store.list_all(), ([], 0))


if __name__ == '__main__':
    unittest.main()
