"""Shared utilities: calendar arithmetic and structured logging helpers."""
