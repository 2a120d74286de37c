"""grantsync - declarative access-control reconciliation for Atlassian Cloud."""

__version__ = "0.1.0"
