"""Result values for operations that can fail.

Handlers and adapters return ``Success`` or ``Failure`` instead of raising, so
the HTTP layer can map every outcome to a status code with a single ``match``.

Usage:
    def find_brand(brand_id: UUID) -> Result[Brand, DomainError]:
        brand = brands.get(brand_id)
        if brand is None:
            return Failure(error=NotFoundError(...))
        return Success(value=brand)

    match find_brand(brand_id):
        case Success(value=brand):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying its payload.

    Attributes:
        value: Payload produced by the operation.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying a typed error.

    Attributes:
        error: Error describing the failure kind and message.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
