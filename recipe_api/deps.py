from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from .errors import NotFoundError, StoreError
from .results import Failure, NotFound, Outcome


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.store.session()
    try:
        yield db
    finally:
        db.close()


def unwrap(outcome: Outcome, what: str):
    """Return the value of an Ok outcome, raise the matching API error otherwise."""
    if isinstance(outcome, NotFound):
        raise NotFoundError(f"{what} not found")
    if isinstance(outcome, Failure):
        raise StoreError(outcome.detail)
    return outcome.value
