"""ticketbridge: a thin HTTP bridge for creating and listing Jira tickets."""

__version__ = "0.1.0"

__all__ = ["__version__"]
