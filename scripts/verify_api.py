
import os

import requests

APPOINTMENTS_URL = os.environ.get("APPOINTMENTS_URL", "http://127.0.0.1:3000")
PATIENTS_URL = os.environ.get("PATIENTS_URL", "http://127.0.0.1:3001")


def check_health(base_url, label=""):
    print(f"\n--- [{label}] Health check: {base_url} ---")
    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        print(f"Status: {response.status_code} | {response.json()}")
        return response.status_code == 200
    except requests.RequestException as e:
        print(f"❌ Connection Failed: {e}")
        return False


def verify_patients(base_url):
    print("\n--- Patients: create / update / delete ---")
    created = requests.post(f"{base_url}/api/patients", json={
        "name": "Verification Patient",
        "email": "verify@example.com",
    }, timeout=5)
    print(f"Create: {created.status_code} | {created.json()}")
    if created.status_code != 201:
        return None
    patient = created.json()["data"]

    rejected = requests.post(f"{base_url}/api/patients", json={"name": "No Email"}, timeout=5)
    print(f"Create without email: {rejected.status_code} (expected 400)")

    updated = requests.put(f"{base_url}/api/patients/{patient['id']}", json={"phone": "555-0100", "name": ""}, timeout=5)
    print(f"Update: {updated.status_code} | name kept: {updated.json()['data']['name']}")

    return patient


def verify_appointments(base_url, patient_id):
    print("\n--- Appointments: create / filter / delete ---")
    created = requests.post(f"{base_url}/api/appointments", json={
        "patientId": patient_id,
        "doctorName": "Dr. Verify",
        "appointmentDate": "2024-01-01",
        "appointmentTime": "10:00",
    }, timeout=5)
    print(f"Create: {created.status_code} | {created.json()}")
    if created.status_code != 201:
        return
    appointment = created.json()["data"]

    listed = requests.get(f"{base_url}/api/appointments/patient/{patient_id}", timeout=5).json()
    print(f"For patient {patient_id}: count={listed['count']}")
    for a in listed["data"]:
        print(f" - {a['appointmentDate']} {a['appointmentTime']} | {a['doctorName']} | {a['status']} | ID: {a['id']}")

    unknown = requests.get(f"{base_url}/api/appointments/patient/unknown-id", timeout=5).json()
    print(f"Unknown patient: count={unknown['count']} (expected 0)")

    deleted = requests.delete(f"{base_url}/api/appointments/{appointment['id']}", timeout=5)
    print(f"Delete: {deleted.status_code} | {deleted.json()}")
    again = requests.delete(f"{base_url}/api/appointments/{appointment['id']}", timeout=5)
    print(f"Delete again: {again.status_code} (expected 404)")


if __name__ == "__main__":
    # Start both services first, e.g.
    #   PORT=3000 appointment-service
    #   PORT=3001 patient-service
    if check_health(PATIENTS_URL, "PATIENTS") and check_health(APPOINTMENTS_URL, "APPOINTMENTS"):
        patient = verify_patients(PATIENTS_URL)
        if patient:
            verify_appointments(APPOINTMENTS_URL, patient["id"])
