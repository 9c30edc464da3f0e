"""Jira estimator client: find unestimated issues and normalize Jira values into domain types."""

__version__ = "0.1.0"
