"""Tests for root and health endpoints."""

import unittest
from dataclasses import replace
from unittest.mock import patch, MagicMock

from fastapi.testclient import TestClient

from api.main import app, SERVICE_NAME
from utils.settings import get_settings


class TestHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _use_mongo(self):
        settings = replace(get_settings(), mongo_url="mongodb://db:27017")
        app.dependency_overrides[get_settings] = lambda: settings

    def test_root(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["service"], SERVICE_NAME)
        self.assertEqual(response.json()["status"], "running")

    def test_health_in_memory_store(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")
        self.assertIn("user_store", response.json()["services"])

    @patch('api.routes.health.get_mongodb_client')
    def test_health_mongodb_up(self, mock_get_client):
        mock_get_client.return_value = MagicMock()
        self._use_mongo()

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["services"]["mongodb"]["status"], "healthy")

    @patch('api.routes.health.get_mongodb_client')
    def test_health_mongodb_down(self, mock_get_client):
        mock_get_client.return_value = None
        self._use_mongo()

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "degraded")


if __name__ == '__main__':
    unittest.main()
