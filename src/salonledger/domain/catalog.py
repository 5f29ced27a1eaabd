"""Service catalog domain service."""

from salonledger.database.base import Database
from salonledger.domain.entities import Service as ServiceEntity
from salonledger.domain.errors import (
    NotFoundError,
    ValidationError,
    missing_field,
    service_not_found,
)


class CatalogService:
    """Service for managing the list of offered services."""

    def __init__(self, db: Database):
        """Initialize catalog service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_service(self, name: str) -> str:
        """Add a service to the catalog. Names are not checked for uniqueness.

        Raises:
            ValidationError: If name is empty
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError(missing_field("Service name"))
        return self.db.create_service(name)

    def list_services(self) -> list[ServiceEntity]:
        return self.db.list_services()

    def delete_service(self, service_id: str) -> None:
        """Remove a service from the catalog.

        Raises:
            NotFoundError: If service doesn't exist
        """
        if self.db.get_service(service_id) is None:
            raise NotFoundError(service_not_found(service_id))
        self.db.delete_service(service_id)
