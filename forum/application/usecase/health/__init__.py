"""Health check use cases."""

from .check_database import CheckDatabaseResponse, CheckDatabaseUseCase

__all__ = ["CheckDatabaseResponse", "CheckDatabaseUseCase"]
