import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from . import models
from .results import Failure, NotFound, Ok, Outcome

logger = logging.getLogger(__name__)


def _failure(db: Session, action: str, exc: SQLAlchemyError) -> Failure:
    db.rollback()
    logger.error("Store error while %s", action, exc_info=exc)
    return Failure(f"{action}: {exc.__class__.__name__}")


def list_ingredients(db: Session, search: str | None = None) -> Outcome:
    try:
        query = db.query(models.Ingredient)
        if search:
            query = query.filter(models.Ingredient.name.icontains(search, autoescape=True))
        return Ok(query.all())
    except SQLAlchemyError as exc:
        return _failure(db, "listing ingredients", exc)


def get_ingredient(db: Session, ingredient_id: str) -> Outcome:
    try:
        ingredient = db.get(models.Ingredient, ingredient_id)
    except SQLAlchemyError as exc:
        return _failure(db, "reading ingredient", exc)
    if ingredient is None:
        return NotFound()
    return Ok(ingredient)


def create_ingredient(db: Session, name: str) -> Outcome:
    try:
        db_ingredient = models.Ingredient(name=name)
        db.add(db_ingredient)
        db.commit()
        db.refresh(db_ingredient)
        return Ok(db_ingredient)
    except SQLAlchemyError as exc:
        return _failure(db, "creating ingredient", exc)


def update_ingredient(db: Session, ingredient_id: str, name: str) -> Outcome:
    try:
        db_ingredient = db.get(models.Ingredient, ingredient_id)
        if db_ingredient is None:
            return NotFound()
        db_ingredient.name = name
        db.commit()
        db.refresh(db_ingredient)
        return Ok(db_ingredient)
    except SQLAlchemyError as exc:
        return _failure(db, "updating ingredient", exc)


def delete_ingredient(db: Session, ingredient_id: str) -> Outcome:
    try:
        db_ingredient = db.get(models.Ingredient, ingredient_id)
        if db_ingredient is None:
            return NotFound()
        # drop the links first, the foreign key would reject the delete
        db.query(models.RecipeIngredient).filter(
            models.RecipeIngredient.ingredient_id == ingredient_id
        ).delete(synchronize_session=False)
        db.delete(db_ingredient)
        db.commit()
        return Ok(ingredient_id)
    except SQLAlchemyError as exc:
        return _failure(db, "deleting ingredient", exc)


def list_recipes(db: Session, search: str | None = None) -> Outcome:
    try:
        query = db.query(models.Recipe)
        if search:
            query = query.filter(models.Recipe.name.icontains(search, autoescape=True))
        return Ok(query.all())
    except SQLAlchemyError as exc:
        return _failure(db, "listing recipes", exc)


def get_recipe(db: Session, recipe_id: str) -> Outcome:
    try:
        recipe = (
            db.query(models.Recipe)
            .options(
                selectinload(models.Recipe.recipe_ingredients).selectinload(
                    models.RecipeIngredient.ingredient
                )
            )
            .filter(models.Recipe.id == recipe_id)
            .first()
        )
    except SQLAlchemyError as exc:
        return _failure(db, "reading recipe", exc)
    if recipe is None:
        return NotFound()
    return Ok(recipe)
