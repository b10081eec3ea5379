"""Test configuration and fixtures."""

import os

# bcrypt at its minimum work factor keeps the suite fast
os.environ.setdefault("AUTH__PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")
