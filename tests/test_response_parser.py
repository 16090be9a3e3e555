import json

import pytest

from recipe_importer.app.services.errors import MalformedResponse
from recipe_importer.app.services.response_parser import parse_recipe_response, strip_code_fences

PAYLOAD = {
    "title": "Pancakes",
    "category": "Breakfast",
    "cuisine": "American",
    "servings": "4 servings",
    "prep_time_minutes": 10,
    "cook_time_minutes": 20,
    "ingredients": "Flour – 2 cups\nMilk – 1 cup",
    "steps": "1. Mix 2 cups flour and 1 cup milk\n2. Fry",
    "notes": "Source: https://example.com",
}


def test_fenced_json_is_parsed():
    raw = "```json\n" + json.dumps(PAYLOAD) + "\n```"
    recipe = parse_recipe_response(raw)
    assert recipe.title == "Pancakes"
    assert recipe.steps.splitlines()[0].startswith("1. ")


def test_bare_fences_are_stripped():
    assert strip_code_fences("```\n{}\n```") == "{}"


def test_total_time_is_sum():
    recipe = parse_recipe_response(json.dumps(PAYLOAD))
    assert recipe.total_time_minutes == 30


def test_total_time_needs_both_parts():
    payload = {k: v for k, v in PAYLOAD.items() if k != "cook_time_minutes"}
    payload["total_time_minutes"] = 45
    recipe = parse_recipe_response(json.dumps(payload))
    assert recipe.prep_time_minutes == 10
    assert recipe.total_time_minutes is None


def test_zero_minutes_count_as_present():
    payload = dict(PAYLOAD, prep_time_minutes=0, cook_time_minutes=15)
    assert parse_recipe_response(json.dumps(payload)).total_time_minutes == 15


def test_non_json_is_malformed():
    with pytest.raises(MalformedResponse):
        parse_recipe_response("Sorry, I cannot help.")


def test_json_array_is_malformed():
    with pytest.raises(MalformedResponse):
        parse_recipe_response("[1, 2, 3]")


def test_json_inside_noise_is_recovered():
    raw = "Here is your recipe:\n" + json.dumps(PAYLOAD) + "\nEnjoy!"
    assert parse_recipe_response(raw).title == "Pancakes"


def test_shape_is_repaired():
    payload = {
        "recipe": {
            "title": "Dal",
            "category": None,
            "cuisine": "null",
            "servings": 4,
            "prep_time_minutes": "15 minutes",
            "cook_time_minutes": 25.0,
            "ingredients": ["Lentils – 1 cup", "Water – 3 cups"],
            "steps": ["1. Rinse lentils", "2. Simmer"],
        }
    }
    recipe = parse_recipe_response(json.dumps(payload))
    assert recipe.category == "Other"
    assert recipe.cuisine is None
    assert recipe.servings == "4"
    assert recipe.prep_time_minutes == 15
    assert recipe.cook_time_minutes == 25
    assert recipe.total_time_minutes == 40
    assert recipe.ingredients == "Lentils – 1 cup\nWater – 3 cups"
    assert recipe.steps == "1. Rinse lentils\n2. Simmer"
    assert recipe.notes is None


@pytest.mark.parametrize(
    "prep, expected",
    [
        ("1 hour 30 minutes", 90),
        ("1.5 hours", 90),
        ("2 hrs", 120),
        ("1h30", 90),
        ("45 min", 45),
        ("45", 45),
    ],
)
def test_duration_strings_are_converted(prep, expected):
    payload = dict(PAYLOAD, prep_time_minutes=prep, cook_time_minutes=10)
    recipe = parse_recipe_response(json.dumps(payload))
    assert recipe.prep_time_minutes == expected
    assert recipe.total_time_minutes == expected + 10


def test_unrecognized_duration_is_dropped():
    payload = dict(PAYLOAD, prep_time_minutes="overnight, then 20 minutes")
    recipe = parse_recipe_response(json.dumps(payload))
    assert recipe.prep_time_minutes is None
    assert recipe.total_time_minutes is None


def test_deeply_nested_reply_is_malformed():
    with pytest.raises(MalformedResponse):
        parse_recipe_response('{"a":' * 100000 + "1" + "}" * 100000)
