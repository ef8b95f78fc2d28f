import os
import sqlite3
import tempfile
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

import config
from app.main import app


class ApiTestCase(unittest.TestCase):
    """Runs the real app against a throwaway SQLite file per test."""

    # False lets a test see the 500 body the catch-all handler sends
    raise_server_exceptions = True

    def setUp(self):
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        self.db_path = os.path.join(tmpdir.name, "lifttrack_test.db")

        url_patch = patch.object(config, "DATABASE_URL", f"sqlite+aiosqlite:///{self.db_path}")
        url_patch.start()
        self.addCleanup(url_patch.stop)

        # Entering the client runs the lifespan, which creates the tables
        self.client = TestClient(app, raise_server_exceptions=self.raise_server_exceptions)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def query(self, sql, params=()):
        """Read the database file directly, bypassing the API."""
        with sqlite3.connect(self.db_path) as conn:
            return conn.execute(sql, params).fetchall()

    def register(self, username="alice", password="secret"):
        return self.client.post("/api/users/register", json={"username": username, "password": password})

    def create_plan(self, user_id, plan_name="Push Day", description="Chest and triceps"):
        return self.client.post(
            "/api/workout-plans",
            json={"user_id": user_id, "plan_name": plan_name, "description": description},
        )

    def add_exercise(self, plan_id, exercise_name="Bench Press", sets=4, repetitions=8, notes="Pause at the bottom"):
        return self.client.post(
            f"/api/exercises/{plan_id}",
            json={"exercise_name": exercise_name, "sets": sets, "repetitions": repetitions, "notes": notes},
        )
