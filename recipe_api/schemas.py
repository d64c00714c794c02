from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IngredientIn(BaseModel):
    # checked by the handler so bad input maps to 400, not 422
    name: Any = Field(default=None, json_schema_extra={"example": "Potato"})


class Ingredient(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class Message(BaseModel):
    message: str


class Recipe(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str] = None
    servings: Optional[int] = None
    prep_time: Optional[int] = Field(default=None, serialization_alias="prepTime")
    cook_time: Optional[int] = Field(default=None, serialization_alias="cookTime")
    instructions: Optional[str] = None


class RecipeIngredient(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    ingredient_id: str = Field(serialization_alias="ingredientId")
    quantity: float
    unit: str
    ingredient: Ingredient


class RecipeDetail(Recipe):
    ingredients: List[RecipeIngredient] = Field(
        default_factory=list, validation_alias="recipe_ingredients"
    )
