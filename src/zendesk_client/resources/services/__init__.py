"""Resource clients of the Jira integration services API."""

from .links import Links

__all__ = ["Links"]
