"""Base service class for domain services."""

from typing import Awaitable, Callable, Optional, TypeVar

import logfire

from tube.domain.error import ConflictError

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    async def _write_with_retry(
        self,
        resource: str,
        identifier: str,
        attempt: Callable[[], Awaitable[Optional[T]]],
        max_attempts: int,
    ) -> T:
        """Run a read-modify-write until its version-checked write lands.

        ``attempt`` must re-read the entity on every call and return the
        stored result, or None when the write was rejected as stale.

        Raises:
            ConflictError: If every attempt lost to a concurrent writer
        """
        for number in range(1, max_attempts + 1):
            result = await attempt()
            if result is not None:
                return result
            logfire.warn(
                "Stale write rejected, retrying",
                resource=resource,
                identifier=identifier,
                attempt=number,
            )

        logfire.error(
            "Write attempts exhausted",
            resource=resource,
            identifier=identifier,
            attempts=max_attempts,
        )
        raise ConflictError(resource, identifier, max_attempts)
