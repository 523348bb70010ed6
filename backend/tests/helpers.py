"""Shared test constants."""

from datetime import datetime, timezone

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

VALID_CUSTOMER = {"name": "Ana", "address": "1 Main St", "phone": "0888123456"}
