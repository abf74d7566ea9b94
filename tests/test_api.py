# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from datetime import date
from pathlib import Path
from unittest import mock

from fastapi.testclient import TestClient

from fittrack.api import create_app
from fittrack.config import Settings
from fittrack.store import JsonFileStore, MemoryStore


def _settings(tmp: Path) -> Settings:
    settings = Settings()
    settings.jwt_secret = "test-secret"
    settings.token_ttl_seconds = 3600
    settings.users_file = tmp / "users.json"
    settings.cors_origins = ["*"]
    return settings


class TestFitTrackApi(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="fittrack-test-"))
        self.settings = _settings(self._tmp)
        self.store = JsonFileStore(self.settings.users_file)
        self.client = TestClient(create_app(self.settings, store=self.store))

    def tearDown(self) -> None:
        self.client.close()
        shutil.rmtree(self._tmp, ignore_errors=True)

    def _register_and_login(self, email: str = "ann@example.com", password: str = "pw-123") -> dict:
        resp = self.client.post("/api/auth/register", json={"name": "Ann", "email": email, "password": password})
        self.assertEqual(resp.status_code, 201)
        resp = self.client.post("/api/auth/login", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 200)
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    def _workout(self, **overrides) -> dict:
        body = {
            "exerciseName": "Running",
            "sets": 1,
            "reps": 1,
            "date": "2024-01-01",
            "intensity": "Medium",
            "duration": 30,
            "calories": 10,
        }
        body.update(overrides)
        return body

    def test_root_and_health(self) -> None:
        self.assertEqual(self.client.get("/").text, "Backend is working!")
        self.assertEqual(self.client.get("/api/health").json(), {"ok": True})

    def test_register_twice(self) -> None:
        body = {"name": "Ann", "email": "ann@example.com", "password": "pw-123"}
        resp = self.client.post("/api/auth/register", json=body)
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json(), {"message": "User registered successfully"})

        resp = self.client.post("/api/auth/register", json=body)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "User already exists"})
        self.assertEqual(len(self.store.load()), 1)

    def test_login_failures_share_message(self) -> None:
        self._register_and_login()
        wrong = self.client.post("/api/auth/login", json={"email": "ann@example.com", "password": "nope"})
        unknown = self.client.post("/api/auth/login", json={"email": "bo@example.com", "password": "nope"})
        self.assertEqual(wrong.status_code, 400)
        self.assertEqual(unknown.status_code, 400)
        self.assertEqual(wrong.json(), unknown.json())
        self.assertEqual(wrong.json(), {"message": "Invalid credentials"})

    def test_protected_routes_require_token(self) -> None:
        for path in ("/api/dashboard", "/api/dashboard/calories-by-day", "/api/dashboard/stats"):
            resp = self.client.get(path)
            self.assertEqual(resp.status_code, 401, path)
            self.assertEqual(resp.json(), {"message": "No token, authorization denied"})
        resp = self.client.get("/api/dashboard", headers={"Authorization": "Bearer nonsense"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Token is not valid"})
        resp = self.client.post("/api/add-workout", json=self._workout())
        self.assertEqual(resp.status_code, 401)

    def test_dashboard_hides_password(self) -> None:
        headers = self._register_and_login()
        resp = self.client.get("/api/dashboard", headers=headers)
        self.assertEqual(resp.status_code, 200)
        user = resp.json()["user"]
        self.assertEqual(user["email"], "ann@example.com")
        self.assertEqual(user["name"], "Ann")
        self.assertEqual(user["workouts"], [])
        self.assertNotIn("password", user)

    def test_add_workout_and_statistics(self) -> None:
        headers = self._register_and_login()
        for body in (
            self._workout(date="2024-01-01", calories=10, duration=2),
            self._workout(date="2024-01-01", calories=5, duration=1),
            self._workout(date="2024-01-02", calories=8, duration=3),
        ):
            resp = self.client.post("/api/add-workout", json=body, headers=headers)
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.json(), {"message": "Workout added successfully"})

        workouts = self.client.get("/api/dashboard", headers=headers).json()["user"]["workouts"]
        self.assertEqual(len(workouts), 3)
        self.assertEqual(len({w["id"] for w in workouts}), 3)
        self.assertEqual(workouts[0]["exerciseName"], "Running")

        resp = self.client.get("/api/dashboard/calories-by-day", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            [{"date": "2024-01-01", "calories": 25}, {"date": "2024-01-02", "calories": 24}],
        )
        # Whole totals are serialized without a trailing ".0".
        self.assertIsInstance(resp.json()[0]["calories"], int)

        with mock.patch("fittrack.dashboard.stats.date") as fake_date:
            fake_date.today.return_value = date(2024, 1, 1)
            fake_date.fromisoformat.side_effect = date.fromisoformat
            resp = self.client.get("/api/dashboard/stats", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"totalCalories": 25, "totalWorkouts": 2, "avgCaloriesPerWorkout": 12.5})

    def test_stats_with_nothing_today(self) -> None:
        headers = self._register_and_login()
        self.client.post("/api/add-workout", json=self._workout(date="2001-01-01"), headers=headers)
        resp = self.client.get("/api/dashboard/stats", headers=headers)
        self.assertEqual(resp.json(), {"totalCalories": 0, "totalWorkouts": 0, "avgCaloriesPerWorkout": 0})

    def test_add_workout_validation(self) -> None:
        headers = self._register_and_login()
        resp = self.client.post("/api/add-workout", json=self._workout(date="not a date"), headers=headers)
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["message"], "Invalid request")
        resp = self.client.post("/api/add-workout", json=self._workout(duration=-5), headers=headers)
        self.assertEqual(resp.status_code, 422)

    def test_token_for_deleted_user_is_not_found(self) -> None:
        headers = self._register_and_login()
        self.store.save([])
        self.assertEqual(self.client.get("/api/dashboard", headers=headers).status_code, 404)
        resp = self.client.post("/api/add-workout", json=self._workout(), headers=headers)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "User not found"})

    def test_profile_update(self) -> None:
        headers = self._register_and_login()
        before = self.client.get("/api/dashboard", headers=headers).json()["user"]

        resp = self.client.patch("/api/profile", json={"name": "Annie"}, headers=headers)
        self.assertEqual(resp.status_code, 200)
        user = resp.json()["user"]
        self.assertEqual(user["name"], "Annie")
        self.assertEqual(user["email"], "ann@example.com")
        self.assertEqual(user["createdAt"], before["createdAt"])
        self.assertNotIn("password", user)

        self.client.post("/api/auth/register", json={"name": "Bo", "email": "bo@example.com", "password": "pw"})
        resp = self.client.patch("/api/profile", json={"email": "BO@example.com"}, headers=headers)
        self.assertEqual(resp.status_code, 400)

        resp = self.client.post("/api/auth/login", json={"email": "ann@example.com", "password": "pw-123"})
        self.assertEqual(resp.status_code, 200)

    def test_corrupt_store_is_generic_500(self) -> None:
        headers = self._register_and_login()
        self.settings.users_file.write_text("{not json", encoding="utf-8")
        resp = self.client.get("/api/dashboard", headers=headers)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Server error"})

    def test_planners_are_public(self) -> None:
        resp = self.client.post(
            "/api/dietPlanner",
            json={"age": 30, "gender": "Male", "height": 180, "weight": 80, "targetWeight": 75,
                  "goal": "Weight Loss", "dietType": "Vegetarian", "mealTime": "2", "question": ""},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertIn("<p>Meal 2: Vegetable salad with tofu</p>", resp.json()["response"])

        resp = self.client.post(
            "/api/exercise",
            json={"time": 20, "difficulty": "Medium", "focus": "Leg", "training": "Strength",
                  "equipment": "Dumbbells", "age": 30, "gender": "Male", "height": 180, "weight": 80},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertIn("<h3>Leg Strength Workout - Medium Intensity</h3>", resp.json()["response"])


class TestAppFactory(unittest.TestCase):
    def test_refuses_to_start_without_secret(self) -> None:
        settings = Settings()
        settings.jwt_secret = None
        with self.assertRaises(RuntimeError):
            create_app(settings, store=MemoryStore())

    def test_unhandled_errors_do_not_leak(self) -> None:
        settings = Settings()
        settings.jwt_secret = "test-secret"

        class BrokenStore(MemoryStore):
            def load(self):
                raise KeyError("internal detail")

        client = TestClient(create_app(settings, store=BrokenStore()), raise_server_exceptions=False)
        resp = client.post("/api/auth/login", json={"email": "ann@example.com", "password": "pw"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Server error"})
        client.close()


if __name__ == "__main__":
    unittest.main()
