from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from recipe_importer.app.services.content_parsing.models import ContentSource


class ParsedRecipe(BaseModel):
    """Canonical recipe record produced by one extraction request."""

    title: str
    category: str
    cuisine: Optional[str] = None
    servings: Optional[str] = None
    prep_time_minutes: Optional[int] = None
    cook_time_minutes: Optional[int] = None
    total_time_minutes: Optional[int] = None
    ingredients: str = ""
    steps: str = ""
    notes: Optional[str] = None


class ParseRecipeRequest(BaseModel):
    # Left untyped so a non-string payload reaches the pipeline's own input check.
    input: Any = None


class ParseRecipeResponse(BaseModel):
    recipe: ParsedRecipe
    source_url: Optional[str] = None
    content_source: ContentSource


class FormatRecipeRequest(BaseModel):
    ingredients: Optional[str] = None
    steps: Optional[str] = None


class FormatRecipeResponse(BaseModel):
    ingredients: Optional[str] = None
    steps: Optional[str] = None


class RecipeForm(BaseModel):
    title: Optional[str] = None
    category: Optional[str] = None
    cuisine: Optional[str] = None
    servings: Optional[str] = None
    prep_time_minutes: Optional[int] = None
    cook_time_minutes: Optional[int] = None
    total_time_minutes: Optional[int] = None
    ingredients: Optional[str] = None
    steps: Optional[str] = None


class ValidationResult(BaseModel):
    is_valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)
