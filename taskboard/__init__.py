"""Task-management web API: user accounts, JWT auth and per-user tasks."""

__version__ = "0.1.0"
