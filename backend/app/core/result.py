"""Operation Results: explicit success/failure values returned by PostService.

Invariants:
    - An Ok always carries a value; an Err always carries a PostServiceError
    - Callers branch on isinstance (or .ok), never on exceptions
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.core.errors import PostServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: PostServiceError

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


Result = Union[Ok[T], Err]
