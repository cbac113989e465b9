"""Service catalog domain service."""

import logging
from typing import Optional
from decimal import Decimal

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Service as ServiceEntity
from ledgerbook.domain.errors import (
    ConflictError,
    NotFoundError,
    duplicate_service_name,
    service_not_found,
)
from ledgerbook.domain.validation import validate_amount, validate_text

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for managing the catalog of priced services."""

    def __init__(self, db: Database):
        """Initialize catalog service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_service(self, name: str, price: Decimal) -> int:
        """Add a service to the catalog.

        Args:
            name: Service name
            price: Non-negative price

        Returns:
            Service ID

        Raises:
            ValidationError: If name is blank or price is invalid
            ConflictError: If a service with the same name exists
        """
        name = validate_text(name, "name")
        price = validate_amount(price, field="price")

        if self.db.get_service_by_name(name) is not None:
            raise ConflictError(duplicate_service_name(name))

        service_id = self.db.create_service(name=name, price=price)
        logger.info("Created service %d '%s' at %s", service_id, name, price)
        return service_id

    def get_service(self, service_id: int) -> Optional[ServiceEntity]:
        """Get service by ID, or None if not found."""
        return self.db.get_service(service_id)

    def require_service(self, service_id: int) -> ServiceEntity:
        """Get service by ID.

        Raises:
            NotFoundError: If the service doesn't exist
        """
        service = self.db.get_service(service_id)
        if service is None:
            raise NotFoundError(service_not_found(service_id))
        return service

    def list_services(self, search: Optional[str] = None) -> list[ServiceEntity]:
        """List services by name, optionally filtered by a case-insensitive search term."""
        services = self.db.list_services()
        if search:
            term = search.strip().lower()
            services = [service for service in services if term in service.name.lower()]
        return services

    def delete_service(self, service_id: int) -> None:
        """Remove a service from the catalog.

        Transactions created from the service keep their description and amount.

        Raises:
            NotFoundError: If the service doesn't exist
        """
        self.require_service(service_id)
        self.db.delete_service(service_id)
        logger.info("Deleted service %d", service_id)
