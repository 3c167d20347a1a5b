# lexdb/shared/container.py
from dependency_injector import containers, providers

from lexdb.shared.config import Settings
from lexdb.services.dictionary import Dictionary


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.
    Connects configuration to the dictionary facade.

    `dictionary` is a Factory: every call builds a new Dictionary value from
    the current settings. Tests override `settings` to point elsewhere.
    """

    settings = providers.Singleton(Settings)

    dictionary = providers.Factory(
        Dictionary.from_settings,
        settings=settings,
    )


# Global Container Instance
container = Container()
