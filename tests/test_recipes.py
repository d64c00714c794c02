import uuid

from recipe_api import models


def test_get_beef_chili(client, db):
    recipe = db.query(models.Recipe).filter(models.Recipe.name == "Beef Chili").first()

    res = client.get(f"/api/recipes/{recipe.id}")
    assert res.status_code == 200
    body = res.json()
    assert "Chilli con Carne" in body["description"]
    assert body["servings"] == 2
    assert body["prepTime"] == 20
    assert body["cookTime"] == 120
    assert len(body["ingredients"]) == 8


def test_recipe_ingredients_carry_quantity_and_unit(client, db):
    recipe = db.query(models.Recipe).first()
    body = client.get(f"/api/recipes/{recipe.id}").json()
    by_name = {item["ingredient"]["name"]: item for item in body["ingredients"]}

    assert by_name["Red Pepper"]["quantity"] == 0.5
    assert by_name["Red Pepper"]["unit"] == "Diced"
    assert by_name["Beef Stock"]["unit"] == "stock cube in 400ml of water"
    assert by_name["Beef Mince"]["ingredientId"] == by_name["Beef Mince"]["ingredient"]["id"]


def test_list_and_search_recipes(client):
    res = client.get("/api/recipes")
    assert res.status_code == 200
    assert [r["name"] for r in res.json()] == ["Beef Chili"]

    res = client.get("/api/recipes?search=chili")
    assert len(res.json()) == 1
    res = client.get("/api/recipes?search=lasagne")
    assert res.json() == []


def test_get_unknown_recipe_is_404(client):
    res = client.get(f"/api/recipes/{uuid.uuid4()}")
    assert res.status_code == 404
