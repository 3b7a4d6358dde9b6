"""Base use case and request checks shared by use cases."""

from abc import ABC, abstractmethod
from typing import Any

from tube.domain.error import MissingActorError, MissingFieldError
from tube.domain.value import UserId, validate_identifier


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases validate every caller-supplied value before calling a domain
    service, so a rejected request never reaches storage.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def require_actor(user_id: str | None) -> UserId:
    """Resolve the caller's user ID.

    Raises:
        MissingActorError: If no caller identity was supplied
        InvalidIdentifierError: If the identity is not a valid user ID
    """
    if user_id is None or not user_id.strip():
        raise MissingActorError()
    return UserId(validate_identifier(user_id, "User ID"))


def require_text(value: str | None, field: str) -> str:
    """Return the stripped value, rejecting missing or blank input.

    Raises:
        MissingFieldError: If the value is missing or blank
    """
    if value is None or not value.strip():
        raise MissingFieldError(field)
    return value.strip()


def optional_text(value: str | None, field: str) -> str | None:
    """Like :func:`require_text`, but absent input is allowed.

    Present-but-blank input is still rejected.
    """
    if value is None:
        return None
    return require_text(value, field)
