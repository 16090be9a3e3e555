from typing import Dict

from recipe_importer.app.schemas.recipe import RecipeForm, ValidationResult


def validate_recipe(form: RecipeForm) -> ValidationResult:
    errors: Dict[str, str] = {}

    title = (form.title or "").strip()
    if not title:
        errors["title"] = "Title is required"
    elif len(title) < 3:
        errors["title"] = "Title must be at least 3 characters"

    if not (form.category or "").strip():
        errors["category"] = "Category is required"
    if not (form.ingredients or "").strip():
        errors["ingredients"] = "Ingredients are required"
    if not (form.steps or "").strip():
        errors["steps"] = "Instructions are required"

    if form.prep_time_minutes is not None and form.prep_time_minutes < 0:
        errors["prep_time_minutes"] = "Prep time must be a positive number"
    if form.cook_time_minutes is not None and form.cook_time_minutes < 0:
        errors["cook_time_minutes"] = "Cook time must be a positive number"

    cuisine = (form.cuisine or "").strip()
    if cuisine and len(cuisine) < 2:
        errors["cuisine"] = "Cuisine must be at least 2 characters"

    return ValidationResult(is_valid=not errors, errors=errors)
