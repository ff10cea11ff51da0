"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "3333"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

TESTING = os.environ.get("TESTING") == "true"

# When TESTING=true, use test DB URL so tests never touch production.
if TESTING:
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./transit.db",
    )

# Comma-separated list; "*" allows every origin.
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

RUN_MIGRATIONS = os.environ.get("RUN_MIGRATIONS", "false" if TESTING else "true").lower() == "true"
