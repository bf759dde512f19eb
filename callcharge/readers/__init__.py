"""Readers for call charge input tables."""

from callcharge.readers.vector_reader import ChargeVectorReader

__all__ = ["ChargeVectorReader"]
