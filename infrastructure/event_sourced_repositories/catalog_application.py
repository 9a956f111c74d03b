from eventsourcing.application import Application

from infrastructure.config import Settings, settings


class CatalogApplication(Application):
    """Event-sourced application that stores the catalog aggregates."""


def create_catalog_application(config: Settings = settings) -> CatalogApplication:
    """Build the application with the persistence module named in the settings."""
    return CatalogApplication(env={"PERSISTENCE_MODULE": config.persistence_module})
