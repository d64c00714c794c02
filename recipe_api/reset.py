"""
Reset utility: bring the store back to a known baseline.

Every operation here runs in a single transaction, so a failure leaves the
store as it was before the call.
"""

import logging
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models
from .db import Store
from .errors import SeedFailure, WipeFailure
from .seed import seed_base

logger = logging.getLogger(__name__)

# children before parents, or the foreign keys reject the deletes
WIPE_ORDER = (models.RecipeIngredient, models.Recipe, models.Ingredient)

SeedFunction = Callable[[Session], None]


def _delete_all(session: Session) -> None:
    for model in WIPE_ORDER:
        try:
            session.query(model).delete(synchronize_session=False)
            session.flush()
        except SQLAlchemyError as exc:
            raise WipeFailure(f"Could not delete {model.__tablename__}: {exc}") from exc


def wipe(store: Store) -> None:
    """Delete every row from all three tables."""
    try:
        with store.transaction() as session:
            _delete_all(session)
    except SQLAlchemyError as exc:
        raise WipeFailure(f"Could not commit wipe: {exc}") from exc
    logger.info("Database wiped")


def apply_custom_seed(store: Store, seed_fn: SeedFunction) -> None:
    """Wipe the store, then run `seed_fn` against the same transaction."""
    try:
        with store.transaction() as session:
            _delete_all(session)
            seed_fn(session)
    except SQLAlchemyError as exc:
        raise SeedFailure(f"Seed {getattr(seed_fn, '__name__', seed_fn)!r} failed: {exc}") from exc
    logger.info("Database reset with %s", getattr(seed_fn, "__name__", seed_fn))


def reset_to_base_seed(store: Store) -> None:
    apply_custom_seed(store, seed_base)
