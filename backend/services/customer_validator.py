"""
Customer Validator Service

Validation rules for customer payloads, separated from the service logic.
Each check raises InvalidCustomerError on the first violated rule and
otherwise returns None without touching the database.
"""
import re
import logging

from dtos.request import CustomerCreateRequest, CustomerUpdateRequest, PasswordUpdateRequest
from exceptions import InvalidCustomerError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


class CustomerValidator:
    """Validator for customer create, update and password payloads"""

    @staticmethod
    def _check_email(email) -> None:
        if email is None or not email.strip():
            raise InvalidCustomerError(
                "Customer email cannot be empty",
                invalid_fields={'email': email}
            )
        if not EMAIL_PATTERN.match(email.strip()):
            raise InvalidCustomerError(
                f"Customer email is not valid: {email}",
                invalid_fields={'email': email}
            )

    @staticmethod
    def _check_password(password) -> None:
        if password is None or not password.strip():
            raise InvalidCustomerError(
                "Customer password cannot be empty",
                invalid_fields={'password': 'missing'}
            )

    @classmethod
    def validate_customer(cls, customer: CustomerCreateRequest) -> None:
        """
        Validate a customer about to be created.

        Args:
            customer: Incoming customer DTO

        Raises:
            InvalidCustomerError: If the body is missing, or email/password are empty or malformed
        """
        if customer is None:
            raise InvalidCustomerError("Customer body cannot be null")

        cls._check_email(customer.email)
        cls._check_password(customer.password)

        logger.debug(f"Customer payload validated for {customer.email}")

    @classmethod
    def validate_updates(cls, updates: CustomerUpdateRequest) -> None:
        """
        Validate only the fields a partial update sets.

        Args:
            updates: Partial customer DTO

        Raises:
            InvalidCustomerError: If a provided field breaks a creation rule,
                or a flag is explicitly set to null
        """
        provided = updates.provided_fields()

        if 'email' in provided:
            cls._check_email(updates.email)
        if 'password' in provided:
            cls._check_password(updates.password)

        for flag in ('is_deleted', 'is_verified'):
            if flag in provided and getattr(updates, flag) is None:
                raise InvalidCustomerError(
                    f"Customer {flag} cannot be null",
                    invalid_fields={flag: None}
                )

    @classmethod
    def validate_password(cls, update: PasswordUpdateRequest) -> None:
        """
        Validate a password change.

        Raises:
            InvalidCustomerError: If the new password is empty
        """
        cls._check_password(update.password)
