"""Skill exchange service - in-memory data access for a community skill swap."""

__version__ = "1.0.0"
