from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from . import crud, schemas
from .deps import get_db, unwrap
from .errors import ValidationError

router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])


def _clean_name(payload: Optional[schemas.IngredientIn]) -> str:
    name = payload.name if payload is not None else None
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Ingredient name is required and must be a non-empty string")
    return name.strip().lower()


@router.get("", response_model=List[schemas.Ingredient])
def list_ingredients(search: Optional[str] = None, db: Session = Depends(get_db)):
    return unwrap(crud.list_ingredients(db, search=search), "Ingredients")


@router.get("/{ingredient_id}", response_model=schemas.Ingredient)
def get_ingredient(ingredient_id: str, db: Session = Depends(get_db)):
    return unwrap(crud.get_ingredient(db, ingredient_id), "Ingredient")


@router.post("", response_model=schemas.Ingredient, status_code=201)
def create_ingredient(
    payload: Optional[schemas.IngredientIn] = None, db: Session = Depends(get_db)
):
    name = _clean_name(payload)
    return unwrap(crud.create_ingredient(db, name), "Ingredient")


@router.patch("/{ingredient_id}", response_model=schemas.Ingredient)
def update_ingredient(
    ingredient_id: str,
    payload: Optional[schemas.IngredientIn] = None,
    db: Session = Depends(get_db),
):
    name = _clean_name(payload)
    return unwrap(crud.update_ingredient(db, ingredient_id, name), "Ingredient")


@router.delete("/{ingredient_id}", response_model=schemas.Message)
def delete_ingredient(ingredient_id: str, db: Session = Depends(get_db)):
    unwrap(crud.delete_ingredient(db, ingredient_id), "Ingredient")
    return {"message": f"Ingredient {ingredient_id} deleted"}
