"""Worked object-oriented design examples: SOLID principles, design patterns and small domain models."""

__version__ = "0.1.0"