"""
Integration tests for the patient endpoints.

Tokens are obtained through the real login endpoint so the tests cover
authentication, role checks, pagination headers and the update/delete
status codes together.
"""
from datetime import datetime, timezone
from unittest import mock

from rest_framework import status
from rest_framework.test import APITestCase

from ..exceptions import ConcurrencyConflict
from ..models import MedicalDevice, Patient, Vital


class PatientAPITests(APITestCase):
    def setUp(self) -> None:
        self.alice = Patient.objects.create(
            full_name="Alice Thompson", age=45, gender="Female", diagnosis="Hypertension",
            last_checkup=datetime(2024, 6, 1, tzinfo=timezone.utc),
        )
        self.john = Patient.objects.create(full_name="John Smith", age=60, gender="Male", diagnosis="Diabetes")

    def login_as(self, username: str, password: str) -> None:
        r = self.client.post("/api/auth/login", {"Username": username, "Password": password}, format="json")
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['token']}")

    def as_admin(self) -> None:
        self.login_as("doctor", "med123")

    def test_unauthenticated_get_is_401(self):
        response = self.client.get(f"/api/patients/{self.alice.id}")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_admin_creates_patient_and_sees_it_in_list(self):
        self.as_admin()
        payload = {
            "fullName": "Linda Park", "age": 32, "gender": "Female",
            "diagnosis": "Asthma", "lastCheckup": "2024-06-20T00:00:00Z",
        }
        response = self.client.post("/api/patients", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        new_id = response.data["id"]
        self.assertTrue(response["Location"].endswith(f"/api/patients/{new_id}"))

        listed = self.client.get("/api/patients")
        self.assertIn(new_id, [p["id"] for p in listed.data])

        fetched = self.client.get(f"/api/patients/{new_id}")
        self.assertEqual(fetched.status_code, status.HTTP_200_OK)
        self.assertEqual(dict(fetched.data), {"id": new_id, **payload})

    def test_user_cannot_create(self):
        self.login_as("user", "userpass")
        response = self.client.post("/api/patients", {"fullName": "Linda Park"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(Patient.objects.count(), 2)

    def test_create_without_full_name_reports_field(self):
        self.as_admin()
        response = self.client.post("/api/patients", {"age": 30, "gender": "Male"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("fullName", response.data["error"]["fields"])

    def test_create_rejects_wrong_types(self):
        self.as_admin()
        response = self.client.post("/api/patients", {"fullName": "X", "age": "old"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("age", response.data["error"]["fields"])

    def test_markup_is_stripped_from_names(self):
        self.as_admin()
        response = self.client.post("/api/patients", {"fullName": "<b>Bob</b> Stone"}, format="json")
        self.assertEqual(response.data["fullName"], "Bob Stone")

    def test_get_missing_patient_is_404_without_body(self):
        self.as_admin()
        response = self.client.get("/api/patients/9999")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIsNone(response.data)

    def test_update_replaces_fields(self):
        self.as_admin()
        body = {"id": self.alice.id, "fullName": "Updated Name", "age": 46, "gender": "Female", "diagnosis": "Recovered"}
        response = self.client.put(f"/api/patients/{self.alice.id}", body, format="json")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.full_name, "Updated Name")
        self.assertEqual(self.alice.age, 46)
        self.assertEqual(self.alice.diagnosis, "Recovered")

    def test_update_with_mismatched_id_is_400_and_changes_nothing(self):
        self.as_admin()
        body = {"id": self.alice.id + 1, "fullName": "Changed"}
        response = self.client.put(f"/api/patients/{self.alice.id}", body, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("id", response.data["error"]["fields"])
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.full_name, "Alice Thompson")

    def test_update_requires_an_exact_integer_id(self):
        self.as_admin()
        pk = self.alice.id
        for bad in (pk + 0.9, float(pk), True, f"{pk}.0", None):
            body = {"id": bad, "fullName": "Changed"}
            response = self.client.put(f"/api/patients/{pk}", body, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, bad)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.full_name, "Alice Thompson")

        response = self.client.put(f"/api/patients/{pk}", {"id": str(pk), "fullName": "Changed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_update_missing_patient_is_404(self):
        self.as_admin()
        response = self.client.put("/api/patients/9999", {"id": 9999, "fullName": "Non Existent"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_concurrent_delete_during_update_is_404(self):
        self.as_admin()
        pk = self.john.id

        def vanish(model, pk_, values):
            Patient.objects.filter(pk=pk_).delete()
            raise ConcurrencyConflict(model.__name__, pk_)

        with mock.patch("monitoring.views.patients.save_changes", side_effect=vanish):
            response = self.client.put(f"/api/patients/{pk}", {"id": pk, "fullName": "Late"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_unresolved_conflict_is_generic_500(self):
        self.as_admin()
        pk = self.john.id
        with mock.patch(
            "monitoring.views.patients.save_changes",
            side_effect=ConcurrencyConflict("Patient", pk),
        ):
            response = self.client.put(f"/api/patients/{pk}", {"id": pk, "fullName": "Late"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["error"]["code"], "server_error")
        self.assertNotIn("concurrently", response.data["error"]["message"])

    def test_delete_then_get_is_404(self):
        self.as_admin()
        response = self.client.delete(f"/api/patients/{self.alice.id}")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.get(f"/api/patients/{self.alice.id}").status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.delete(f"/api/patients/{self.alice.id}").status_code, status.HTTP_404_NOT_FOUND)

    def test_deleting_patient_keeps_its_vitals(self):
        device = MedicalDevice.objects.create(device_name="Heart Monitor A100", device_type="Heart Rate Monitor")
        vital = Vital.objects.create(patient=self.alice, medical_device=device, heart_rate=72)
        self.as_admin()
        self.client.delete(f"/api/patients/{self.alice.id}")

        response = self.client.get(f"/api/vitals/{vital.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["patientId"], self.alice.id)
        self.assertEqual(len(self.client.get(f"/api/medicaldevices/{device.id}/vitals").data), 1)


class PatientPaginationTests(APITestCase):
    def setUp(self) -> None:
        Patient.objects.bulk_create([Patient(full_name=f"Patient {i}", age=20 + i) for i in range(23)])
        r = self.client.post("/api/auth/login", {"Username": "user", "Password": "userpass"}, format="json")
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['token']}")

    def assert_page(self, response, number, size, count):
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response["X-Total-Count"], "23")
        self.assertEqual(response["X-Page-Number"], str(number))
        self.assertEqual(response["X-Page-Size"], str(size))
        self.assertEqual(len(response.data), count)

    def test_defaults(self):
        self.assert_page(self.client.get("/api/patients"), 1, 10, 10)

    def test_non_positive_values_fall_back_to_defaults(self):
        default = self.client.get("/api/patients?pageNumber=1&pageSize=10")
        for query in ("pageNumber=0&pageSize=0", "pageNumber=-3&pageSize=-1", "pageNumber=x&pageSize="):
            response = self.client.get(f"/api/patients?{query}")
            self.assert_page(response, 1, 10, 10)
            self.assertEqual(response.data, default.data)

    def test_out_of_range_values_fall_back_to_defaults(self):
        default = self.client.get("/api/patients").data
        huge = "99999999999999999999"
        for query in (f"pageNumber={huge}&pageSize=10", f"pageNumber=1&pageSize={huge}", "pageSize=2147483648"):
            response = self.client.get(f"/api/patients?{query}")
            self.assert_page(response, 1, 10, 10)
            self.assertEqual(response.data, default)

    def test_largest_page_number_is_an_empty_page(self):
        self.assert_page(self.client.get("/api/patients?pageNumber=2147483647&pageSize=2147483647"), 2147483647, 2147483647, 0)

    def test_last_partial_page_and_past_the_end(self):
        self.assert_page(self.client.get("/api/patients?pageNumber=3&pageSize=10"), 3, 10, 3)
        self.assert_page(self.client.get("/api/patients?pageNumber=9&pageSize=10"), 9, 10, 0)

    def test_pages_follow_insertion_order(self):
        first = self.client.get("/api/patients?pageNumber=1&pageSize=5").data
        second = self.client.get("/api/patients?pageNumber=2&pageSize=5").data
        ids = [p["id"] for p in first + second]
        self.assertEqual(ids, sorted(ids))
        self.assertEqual(first[0]["fullName"], "Patient 0")
        self.assertEqual(second[0]["fullName"], "Patient 5")
