"""
Customer-specific Specifications

Concrete specifications for querying customers by their status flags.
"""

from models import Customer
from .specifications import Specification


class CustomersByDeletedStatusSpec(Specification[Customer]):
    """Specification for customers with the given is_deleted flag."""

    def __init__(self, is_deleted: bool):
        """
        Initialize specification.

        Args:
            is_deleted: Flag value to match
        """
        self.is_deleted = is_deleted

    def is_satisfied_by(self, customer: Customer) -> bool:
        """Check if customer has the requested deleted status."""
        return bool(customer.is_deleted) == self.is_deleted

    def to_sql_filter(self):
        """Convert to SQL filter."""
        return Customer.is_deleted == self.is_deleted


class CustomersByVerifiedStatusSpec(Specification[Customer]):
    """Specification for customers with the given is_verified flag."""

    def __init__(self, is_verified: bool):
        """
        Initialize specification.

        Args:
            is_verified: Flag value to match
        """
        self.is_verified = is_verified

    def is_satisfied_by(self, customer: Customer) -> bool:
        """Check if customer has the requested verified status."""
        return bool(customer.is_verified) == self.is_verified

    def to_sql_filter(self):
        """Convert to SQL filter."""
        return Customer.is_verified == self.is_verified
