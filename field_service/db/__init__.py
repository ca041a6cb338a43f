"""Database base and session helpers."""
