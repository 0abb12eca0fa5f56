"""
Ok/Err values for graph loading.

Loading a graph document can fail for reasons the caller reports rather
than crashes on: a missing file, malformed JSON, a document that does
not describe a graph. Each loading step returns Ok or an Err holding a
LoadFailure, and steps are chained with and_then so the first failure
short-circuits the rest.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class LoadFailure:
    """Why a graph document could not be loaded, and from where."""
    reason: str
    path: Optional[Path] = None
    detail: Optional[str] = None

    def at(self, path: Path) -> "LoadFailure":
        """The same failure, attributed to path unless it already names one."""
        return self if self.path is not None else replace(self, path=path)

    def __str__(self) -> str:
        message = self.reason if self.path is None else f"{self.reason}: {self.path}"
        return message if self.detail is None else f"{message} ({self.detail})"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: LoadFailure

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise ValueError(f"Graph loading failed: {self.error}")


Result = Union[Ok[T], Err]


def and_then(result: Result[T], step: Callable[[T], Result[U]]) -> Result[U]:
    """Run the next step on an Ok value; pass an Err through untouched."""
    if isinstance(result, Ok):
        return step(result.value)
    return result
