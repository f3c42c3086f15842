"""
Abstract Configuration Source Interface

Defines the contract for the namespaced key-value resources that back
Starboard's configuration, and the errors they raise.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class ConfigSourceError(Exception):
    """
    A backing store operation failed.

    Attributes:
        status: Status code reported by the store, if any
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ResourceNotFoundError(ConfigSourceError):
    """The named resource does not exist in the namespace."""


class ResourceAlreadyExistsError(ConfigSourceError):
    """The named resource already exists in the namespace."""


class ConfigSource(ABC):
    """
    Abstract interface for a single named, namespaced key-value resource.

    Implementations deal with their own wire format (e.g. base64 for
    Kubernetes Secrets) and always expose plain string mappings.

    Errors:
        get() and delete() raise ResourceNotFoundError when absent.
        create() raises ResourceAlreadyExistsError when present.
        Anything else surfaces as ConfigSourceError.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the resource name."""
        ...

    @property
    @abstractmethod
    def namespace(self) -> str:
        """Return the namespace the resource lives in."""
        ...

    @abstractmethod
    async def get(self) -> dict[str, str]:
        """Fetch the resource's data."""
        ...

    @abstractmethod
    async def create(self, data: Mapping[str, str]) -> None:
        """Create the resource with the given data."""
        ...

    @abstractmethod
    async def delete(self) -> None:
        """Delete the resource."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r}, name={self.name!r})"
