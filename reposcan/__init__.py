"""Scan directories for Git repositories and report uncommitted and ahead/behind status."""

__version__ = "1.3.7"