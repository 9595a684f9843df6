"""
Domain value objects for theory_kit.
"""

from .pair import Pair

__all__ = ["Pair"]
