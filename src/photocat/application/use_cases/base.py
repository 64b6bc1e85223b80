from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

@dataclass(frozen=True)
class UseCaseRequest:
    """Input of a catalog mutation. Every mutation targets one photo id."""
    photo_id: str = ""

@dataclass(frozen=True)
class UseCaseResponse:
    """Result of a catalog mutation.

    ``success`` is False only when nothing was written, e.g. the photo id did
    not resolve. Storage failures are raised, not reported here.
    """
    success: bool = True
    error: Optional[str] = None

RequestT = TypeVar("RequestT", bound=UseCaseRequest)
ResponseT = TypeVar("ResponseT", bound=UseCaseResponse)

class UseCase(ABC, Generic[RequestT, ResponseT]):
    """Load, modify and write back the photo collection in one call."""

    @abstractmethod
    def execute(self, request: RequestT) -> ResponseT:
        ...
