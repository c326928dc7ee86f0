"""Test-wide environment: a throwaway signing key, cheap bcrypt and no MongoDB."""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
# empty rather than unset so a local .env cannot point tests at a real database
os.environ["MONGO_URL"] = ""
