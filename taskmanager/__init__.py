"""Secure Task Manager: a small multi-user task tracking API."""

__version__ = "0.1.0"
