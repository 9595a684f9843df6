"""
Configuration management for theory_kit.

Run budgets and seeds come from environment variables with package
defaults, and are turned into an immutable Strategy per check.
"""

from .configuration import Configuration, get_configuration

__all__ = ["Configuration", "get_configuration"]
