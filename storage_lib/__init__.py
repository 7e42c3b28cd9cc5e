"""File-backed entity storage."""
