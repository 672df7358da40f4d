from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers
from dependency_injector.providers import Provider

from tcg_catalog.core import Container, container
from tcg_catalog.database import DatabaseSession

T = TypeVar("T")


def _provider_name(provider: Provider[T]) -> str:
    for name, candidate in container.providers.items():
        if candidate is provider:
            return name
    raise ValueError(f"{provider!r} is not a provider of the application container")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    Each request resolves the provider on its own container bound to the
    request's session; the shared container is never overridden, so
    concurrent requests cannot see each other's session.
    """
    name = _provider_name(provider)

    def dependency(db: DatabaseSession) -> T:
        request_container = Container(db=providers.Object(db))
        return getattr(request_container, name)()

    return dependency
