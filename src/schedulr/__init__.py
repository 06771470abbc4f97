"""Schedulr: a single-user task scheduler with a console front end."""

__version__ = "0.1.0"
