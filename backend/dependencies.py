"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from repositories import CustomerRepository, UserDetailsRepository, ProductRepository
from services.interfaces import ICustomerService, IProductService
from services.customer_service import CustomerService
from services.product_service import ProductService


def get_customer_repository(db: Session) -> CustomerRepository:
    """
    Factory function for creating CustomerRepository instances.

    Args:
        db: Database session

    Returns:
        CustomerRepository instance
    """
    return CustomerRepository(db)


def get_user_details_repository(db: Session) -> UserDetailsRepository:
    """
    Factory function for creating UserDetailsRepository instances.

    Args:
        db: Database session

    Returns:
        UserDetailsRepository instance
    """
    return UserDetailsRepository(db)


def get_product_repository(db: Session) -> ProductRepository:
    """
    Factory function for creating ProductRepository instances.

    Args:
        db: Database session

    Returns:
        ProductRepository instance
    """
    return ProductRepository(db)


def get_customer_service(db: Session = Depends(get_db)) -> ICustomerService:
    """
    Factory function for creating CustomerService instances.

    Args:
        db: Database session (injected)

    Returns:
        ICustomerService: Customer service implementation

    Note: This can be easily swapped for a different implementation
    or a mock for testing purposes.
    """
    return CustomerService(get_customer_repository(db), get_user_details_repository(db))


def get_product_service(db: Session = Depends(get_db)) -> IProductService:
    """
    Factory function for creating ProductService instances.

    Args:
        db: Database session (injected)

    Returns:
        IProductService: Product service implementation
    """
    return ProductService(get_product_repository(db))
