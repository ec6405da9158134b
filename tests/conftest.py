"""Test environment: in-memory SQLite and a fixed cookie secret, set before the app is imported."""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_SECRET"] = "test-session-secret-not-for-production"
os.environ["SEED_DEMO_CONTENT"] = "true"
os.environ["DEFAULT_ADMIN_USERNAME"] = "admin"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin"
os.environ["LOG_LEVEL"] = "WARNING"
