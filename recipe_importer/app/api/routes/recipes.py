from typing import Callable

from fastapi import APIRouter, Depends

from recipe_importer.app.api.deps import get_backend_factory
from recipe_importer.app.schemas.recipe import (
    FormatRecipeRequest,
    FormatRecipeResponse,
    ParseRecipeRequest,
    ParseRecipeResponse,
    RecipeForm,
    ValidationResult,
)
from recipe_importer.app.services import recipe_extraction
from recipe_importer.app.services.llm_client import CompletionBackend
from recipe_importer.app.services.recipe_formatters import format_ingredients, format_steps
from recipe_importer.app.services.recipe_validation import validate_recipe

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("/parse", response_model=ParseRecipeResponse)
async def parse_recipe_endpoint(
    payload: ParseRecipeRequest,
    backend_factory: Callable[[], CompletionBackend] = Depends(get_backend_factory),
):
    return await recipe_extraction.extract_recipe(payload.input, backend_factory)


@router.post("/format", response_model=FormatRecipeResponse)
def format_recipe_text(payload: FormatRecipeRequest):
    return FormatRecipeResponse(
        ingredients=format_ingredients(payload.ingredients) if payload.ingredients is not None else None,
        steps=format_steps(payload.steps) if payload.steps is not None else None,
    )


@router.post("/validate", response_model=ValidationResult)
def validate_recipe_form(payload: RecipeForm):
    return validate_recipe(payload)
