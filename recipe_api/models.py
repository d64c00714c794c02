import uuid

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .db import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Ingredient(Base):
    __tablename__ = "ingredients"
    id = Column(String(36), primary_key=True, default=new_id)
    # no unique constraint: names are lower-cased by the API, not by the store
    name = Column(String(200), index=True, nullable=False)

    recipe_ingredients = relationship("RecipeIngredient", back_populates="ingredient")


class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), index=True, nullable=False)
    description = Column(Text, nullable=True)
    servings = Column(Integer, nullable=True)
    prep_time = Column(Integer, nullable=True)  # minutes
    cook_time = Column(Integer, nullable=True)  # minutes
    instructions = Column(Text, nullable=True)

    recipe_ingredients = relationship("RecipeIngredient", back_populates="recipe")


class RecipeIngredient(Base):
    __tablename__ = "recipe_ingredients"
    recipe_id = Column(String(36), ForeignKey("recipes.id"), primary_key=True)
    ingredient_id = Column(String(36), ForeignKey("ingredients.id"), primary_key=True)
    quantity = Column(Float, nullable=False)
    unit = Column(String(200), nullable=False)  # free text, e.g. "g" or "Diced"

    recipe = relationship("Recipe", back_populates="recipe_ingredients")
    ingredient = relationship("Ingredient", back_populates="recipe_ingredients")
