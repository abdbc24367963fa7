"""
Constants Package

Validation whitelists, scoring weights and seed data.
"""

from .validation import *  # noqa: F401,F403
from .scoring import *  # noqa: F401,F403
from .seed import SEED_TECHNIQUES, SEED_ITEMS, SEED_RECIPES  # noqa: F401
