"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real cluster or use a real signing key
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-token-secret")
os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017")
os.environ.setdefault("LOG_FORMAT", "text")
