"""Bugzilla triage report for a single team/component."""

__version__ = "0.1.0"
