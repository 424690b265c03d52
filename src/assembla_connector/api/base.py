"""Base resource for API endpoints."""

from typing import Any, TypeVar

from assembla_connector.api.transport import AssemblaTransport

T = TypeVar("T")


class BaseResource:
    """Base class for API resources.

    A resource is a named view onto the shared transport. It adds URL
    templates and payload types, nothing else; all resources of one client
    use the same transport instance.
    """

    def __init__(self, transport: AssemblaTransport):
        """Initialize the resource.

        Args:
            transport: The shared transport instance
        """
        self._transport = transport

    @staticmethod
    def _listing(items: list[T] | None) -> list[T]:
        """Empty listings come back as an empty body."""
        return items if items is not None else []

    @staticmethod
    def _paging(page: int | None = None, per_page: int | None = None, **extra: Any) -> dict[str, str]:
        """Build a query mapping, skipping unset values."""
        query = {"page": page, "per_page": per_page, **extra}
        return {key: str(value) for key, value in query.items() if value is not None}
