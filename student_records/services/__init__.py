"""Business logic services package."""

from .enrollment_service import EnrollmentService

__all__ = ["EnrollmentService"]
