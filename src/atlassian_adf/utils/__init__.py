"""
Utility functions for atlassian-adf.
"""

from .env import getenv, is_env_truthy
from .io import load_adf_json

__all__ = [
    "getenv",
    "is_env_truthy",
    "load_adf_json",
]
