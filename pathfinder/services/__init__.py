"""Services layer - Application orchestration.

Available services:
- CampusNavigator: Loads campus data and answers path queries
"""

from .navigator import CampusNavigator

__all__ = ["CampusNavigator"]
