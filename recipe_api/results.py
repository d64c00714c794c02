"""Tagged outcomes returned by the store access layer."""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Ok:
    value: Any = None


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Failure:
    detail: str


Outcome = Union[Ok, NotFound, Failure]
