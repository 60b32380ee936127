"""
Language-specific source generators.

This module contains generators for the supported output languages.
"""

from .java import JavaGenerator, create_java_generator

__all__ = ["JavaGenerator", "create_java_generator"]
