"""Core configuration, exceptions and helpers."""
