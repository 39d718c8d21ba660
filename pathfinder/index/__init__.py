"""Associative index backing every node and label lookup."""

from .hash_table import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR, HashTableMap

__all__ = ["HashTableMap", "DEFAULT_CAPACITY", "DEFAULT_LOAD_FACTOR"]
