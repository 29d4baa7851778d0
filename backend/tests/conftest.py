"""Root conftest: shared test configuration."""

import os

# Tests never talk to a real database server or Discord
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DISCORD_WEBHOOK_URL", "")
