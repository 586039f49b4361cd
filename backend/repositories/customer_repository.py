"""
Customer repository for customer-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from models import Customer, UserDetails
from .base_repository import BaseRepository
from .customer_specifications import CustomersByDeletedStatusSpec, CustomersByVerifiedStatusSpec


class CustomerRepository(BaseRepository[Customer]):
    """Repository for Customer model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Customer)

    def get_by_email(self, email: str) -> Optional[Customer]:
        """
        Find a customer by login email.

        Args:
            email: Email address (matched exactly)

        Returns:
            Customer instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.email == email).first()

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether another customer already uses an email.

        Args:
            email: Email address to check
            exclude_id: Customer allowed to own the email (the one being updated)

        Returns:
            True if a different customer has this email
        """
        query = self.db.query(self.model).filter(self.model.email == email)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.count() > 0

    def get_by_deleted_status(self, is_deleted: bool) -> List[Customer]:
        """Get all customers with the given deleted flag."""
        return self.find_by(CustomersByDeletedStatusSpec(is_deleted))

    def get_by_verified_status(self, is_verified: bool) -> List[Customer]:
        """Get all customers with the given verified flag."""
        return self.find_by(CustomersByVerifiedStatusSpec(is_verified))


class UserDetailsRepository(BaseRepository[UserDetails]):
    """Repository for the personal details owned by user accounts."""

    def __init__(self, db: Session):
        super().__init__(db, UserDetails)
