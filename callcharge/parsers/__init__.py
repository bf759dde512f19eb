"""Parsers for call charge input text."""

from callcharge.parsers.timestamp_parser import parse_timestamp

__all__ = ["parse_timestamp"]
