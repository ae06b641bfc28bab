"""RSS toolkit: canonical IDs, domain records and a filesystem repository."""

__version__ = "0.12.0"