import unittest
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import OperationalError

from tests.helpers import ApiTestCase


class TestWorkoutPlans(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.user_id = self.register().json()["id"]

    def test_create_plan(self):
        response = self.create_plan(self.user_id, "Leg Day", "Squats first")

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["user_id"], self.user_id)
        self.assertEqual(body["plan_name"], "Leg Day")
        self.assertEqual(body["description"], "Squats first")
        self.assertIsInstance(body["plan_id"], int)

    def test_created_plan_is_listed_once(self):
        plan = self.create_plan(self.user_id).json()

        response = self.client.get(f"/api/workout-plans/{self.user_id}")

        self.assertEqual(response.status_code, 200)
        plans = response.json()
        matching = [p for p in plans if p["plan_id"] == plan["plan_id"]]
        self.assertEqual(len(matching), 1)
        self.assertEqual(
            matching[0],
            {"plan_id": plan["plan_id"], "plan_name": "Push Day", "description": "Chest and triceps"},
        )

    def test_listing_keeps_insertion_order_and_owner(self):
        other_user = self.register("bob", "hunter2").json()["id"]
        first = self.create_plan(self.user_id, "A").json()["plan_id"]
        self.create_plan(other_user, "B")
        second = self.create_plan(self.user_id, "C").json()["plan_id"]

        plans = self.client.get(f"/api/workout-plans/{self.user_id}").json()

        self.assertEqual([p["plan_id"] for p in plans], [first, second])

    def test_listing_for_user_without_plans_is_empty(self):
        response = self.client.get("/api/workout-plans/999")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_plan_for_unknown_user_is_a_server_error(self):
        response = self.create_plan(999)

        self.assertEqual(response.status_code, 500)
        self.assertFalse(response.json()["success"])

    def test_plan_without_name_is_a_server_error(self):
        response = self.client.post("/api/workout-plans", json={"user_id": self.user_id})
        self.assertEqual(response.status_code, 500)


class TestWorkoutPlanDeletion(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.user_id = self.register().json()["id"]
        self.plan_id = self.create_plan(self.user_id).json()["plan_id"]
        self.add_exercise(self.plan_id, "Bench Press")
        self.add_exercise(self.plan_id, "Dips")

    def test_delete_removes_plan_and_exercises(self):
        response = self.client.delete(f"/api/workout-plans/{self.plan_id}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "success": True,
                "message": f"Workout plan with ID {self.plan_id} and associated exercises deleted successfully.",
            },
        )
        self.assertEqual(self.client.get(f"/api/exercises/{self.plan_id}").json(), [])
        self.assertEqual(self.client.get(f"/api/workout-plans/{self.user_id}").json(), [])

    def test_delete_leaves_other_plans_alone(self):
        other_plan = self.create_plan(self.user_id, "Pull Day").json()["plan_id"]
        self.add_exercise(other_plan, "Rows")

        self.client.delete(f"/api/workout-plans/{self.plan_id}")

        exercises = self.client.get(f"/api/exercises/{other_plan}").json()
        self.assertEqual([e["exercise_name"] for e in exercises], ["Rows"])

    def test_delete_unknown_plan(self):
        response = self.client.delete("/api/workout-plans/999")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"success": False, "message": "Workout plan not found."})
        self.assertEqual(self.query("SELECT COUNT(*) FROM workout_plan")[0][0], 1)
        self.assertEqual(self.query("SELECT COUNT(*) FROM exercise")[0][0], 2)

    def test_delete_twice(self):
        self.assertEqual(self.client.delete(f"/api/workout-plans/{self.plan_id}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/workout-plans/{self.plan_id}").status_code, 404)

    def test_failed_plan_delete_rolls_back_exercise_delete(self):
        failure = OperationalError("DELETE FROM workout_plan", {}, Exception("connection lost"))
        with patch("app.crud.workout_plan._delete_plan_row", new=AsyncMock(side_effect=failure)):
            response = self.client.delete(f"/api/workout-plans/{self.plan_id}")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"success": False, "message": "Internal Server Error"})
        self.assertEqual(self.query("SELECT COUNT(*) FROM workout_plan")[0][0], 1)
        self.assertEqual(
            self.query("SELECT COUNT(*) FROM exercise WHERE plan_id = ?", (self.plan_id,))[0][0], 2
        )


if __name__ == "__main__":
    unittest.main()
