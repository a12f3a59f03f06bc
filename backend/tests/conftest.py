"""Root conftest — shared test configuration."""

import os

# Keep tests off any real database and away from a developer .env admin secret
os.environ.setdefault("DATABASE_URL", "memory://")
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
