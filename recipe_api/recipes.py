from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from . import crud, schemas
from .deps import get_db, unwrap

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("", response_model=List[schemas.Recipe])
def list_recipes(search: Optional[str] = None, db: Session = Depends(get_db)):
    return unwrap(crud.list_recipes(db, search=search), "Recipes")


@router.get("/{recipe_id}", response_model=schemas.RecipeDetail)
def get_recipe(recipe_id: str, db: Session = Depends(get_db)):
    return unwrap(crud.get_recipe(db, recipe_id), "Recipe")
