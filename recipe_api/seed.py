"""
Base fixture for the recipe database.

The fixture is declared as plain tables below and inserted by `seed_base`.
Recipe ingredients refer to ingredients by key, never by position.

Run `python -m recipe_api.seed` to reset the configured database to it.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models
from .errors import SeedFailure

logger = logging.getLogger(__name__)

INGREDIENTS = [
    ("onion", "Onion"),
    ("garlic", "Garlic"),
    ("beef_mince", "Beef Mince"),
    ("lardons", "Lardons"),
    ("sweetcorn", "Sweetcorn"),
    ("smoked_paprika", "Smoked Paprika"),
    ("cayenne_pepper", "Cayenne Pepper"),
    ("cumin", "Cumin"),
    ("red_pepper", "Red Pepper"),
    ("beef_stock", "Beef Stock"),
    ("kidney_beans", "Kidney Beans"),
    ("tomato_puree", "Tomato Puree"),
]

RECIPE = {
    "name": "Beef Chili",
    "description": "Chilli con Carne using Beef mince and bacon lardons",
    "servings": 2,
    "prep_time": 20,
    "cook_time": 120,
    "instructions": "\n".join([
        "1. Put the Beef stock pot in a jug and add the correct amount (see packet - probably 400 ml) of boiling water. Stir until the stock pot is dissolved. You can be doing this while cooking the onions and peppers.",
        "2. Heat some oil in a suitable frying pan (medium heat). Add the onions and pepper and cook for 10 minutes stirring regularly.",
        "3. Add the garlic and cook for 2 minutes",
        "4. Add the bacon/lardons. Stir and cook for 4 minutes or until cooked.",
        "5. Add the chilli con carne mix. Stir in and cook for 2 minutes.",
        "6. Add the mince. Stir regularly. Continue until all the minced is cooked.",
        "7. Add the tomato puree and the beef stock. Stir thoroughly. Bring to the boil and then turn down to a simmer.",
        "8. Allow to simmer for at least 20 minutes.",
        "9. Taste it.",
        "10. You might want to add some salt. If you want it to be sweeter add tomato ketchup.",
        "11. If starting from cold (i.e. the next day) start by reheating the chilli gently. Skip if you are just continuing from above.",
        "12. Drain the sweet corn and add it to the pan. Stir it in.",
        "13. Turn the heat up to high (not the highest) and boil off the remaining liquid. You will need to pay attention and stir regularly to stop it from burning.",
        "14. Stop when you have the consistency you want.",
    ]),
}

# (ingredient key, quantity, unit)
RECIPE_INGREDIENTS = [
    ("beef_mince", 500, "g"),
    ("lardons", 100, "g"),
    ("garlic", 1, "clove - chopped"),
    ("sweetcorn", 1, "tin"),
    ("tomato_puree", 2, "tbsp"),
    ("onion", 1, "Diced"),
    ("red_pepper", 0.5, "Diced"),
    ("beef_stock", 1, "stock cube in 400ml of water"),
]


def seed_base(session: Session) -> None:
    """Insert the base fixture into an empty store.

    Raises SeedFailure if an ingredient key does not resolve or the store
    rejects a row. The caller owns the transaction.
    """
    ingredients_by_key = {}
    for key, name in INGREDIENTS:
        ingredient = models.Ingredient(id=models.new_id(), name=name)
        session.add(ingredient)
        ingredients_by_key[key] = ingredient

    recipe = models.Recipe(id=models.new_id(), **RECIPE)
    session.add(recipe)

    for key, quantity, unit in RECIPE_INGREDIENTS:
        ingredient = ingredients_by_key.get(key)
        if ingredient is None:
            raise SeedFailure(f"Recipe ingredient refers to unknown ingredient {key!r}")
        session.add(models.RecipeIngredient(
            recipe_id=recipe.id,
            ingredient_id=ingredient.id,
            quantity=quantity,
            unit=unit,
        ))

    try:
        session.flush()
    except SQLAlchemyError as exc:
        raise SeedFailure(f"Store rejected the base fixture: {exc}") from exc
    logger.info(
        "Database has been seeded: %d ingredients, 1 recipe, %d recipe ingredients",
        len(INGREDIENTS), len(RECIPE_INGREDIENTS),
    )


def main():
    from .config import Settings, configure_logging
    from .db import Store
    from .reset import reset_to_base_seed

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    store = Store(settings.store_url)
    try:
        store.create_all()
        reset_to_base_seed(store)
    finally:
        store.dispose()


if __name__ == "__main__":
    main()
