"""Instruction prompt for the generative backend.

The JSON shape requested here is the contract with ``response_parser``; any
field rename must be made in both places.
"""

from typing import Optional

RECIPE_CATEGORIES = (
    "Breakfast",
    "Lunch",
    "Dinner",
    "Dessert",
    "Snack",
    "Appetizer",
    "Main",
    "Side",
    "Cake",
    "Curry",
    "Pudding",
    "Other",
)

PROMPT_TEMPLATE = """
You are a recipe extraction expert. Extract structured recipe data from the following text (which may be unstructured or HTML content).
{source_line}
INPUT:
{content}

INSTRUCTIONS:
1. If it's a URL, imagine you're reading the recipe content from that page.
2. Extract and structure the recipe information into a consistent template.

FORMATTING RULES:

INGREDIENTS:
- Format each line as: "Ingredient – quantity" (Use an en-dash '–' separator).
- Standardize units: PREFER cups, tbsp, tsp for liquids. Use grams for solids when metric.
- Convert mL to cups (240 mL = 1 cup, 120 mL = 1/2 cup, 60 mL = 1/4 cup, etc.).
- List ALL ingredients in a single flat list.
- EXCEPTION: If there are marination ingredients, list "Marination" as a header line, then list marination ingredients below it. Otherwise, NO headers like "For the sauce" or "A/B/C".
- Example: "All-purpose flour – 2 cups"
- Example: "Vanilla extract – 1 tsp"
- Example: "Water – 1 cup" (NOT "Water – 240 mL")
- DO NOT output "null" or "undefined" for quantity. If quantity is missing, just output "Ingredient – ".

STEPS:
- Number all steps (1., 2., 3., etc.).
- Repeat ingredient quantities inside the steps (e.g., "Add 1 cup flour and 2 tbsp sugar to the bowl").
- Break complex actions into multiple steps.
- Clean up messy narrative wording to be concise and clear.
- NO bold text anywhere.

NOTES:
- Add useful tips, variations, or optional upgrades from the original recipe.
- If there are "optional additions", "variations", or "upgrades" mentioned, include them here.
- If the input was a URL, include "Source: [URL]" at the end of the notes.
- Remove duplicate or conflicting information.

GENERAL:
- No bold text anywhere.
- Always produce clean, copy-ready output.
- Scale recipes if the user explicitly asks in the input (e.g. "convert to 1 kg"), otherwise keep original quantities.
- Categorize the recipe ({categories}).
- Estimate times in minutes if not explicitly stated.
- If cuisine type is apparent, include it.

RESPOND ONLY WITH VALID JSON in this exact format (no markdown, no extra text):
{{
  "title": "Recipe name",
  "category": "Category name",
  "cuisine": "Cuisine type or null",
  "servings": "Number of servings as text (e.g., '4 servings')",
  "prep_time_minutes": number or null,
  "cook_time_minutes": number or null,
  "ingredients": "Flour – 1 cup\\nSugar – 2 tbsp\\n...",
  "steps": "1. Preheat oven to 350°F\\n2. Mix 1 cup flour and 2 tbsp sugar...\\n...",
  "notes": "Use room temperature eggs.\\nSource: [URL if available]"
}}
"""


def _category_list() -> str:
    return ", ".join(RECIPE_CATEGORIES[:-1]) + f", or {RECIPE_CATEGORIES[-1]}"


def build_prompt(content: str, source_url: Optional[str] = None) -> str:
    """Render the extraction prompt. Pure: equal arguments give equal output."""
    source_line = f"\nSOURCE URL: {source_url}\n" if source_url else ""
    return PROMPT_TEMPLATE.format(
        source_line=source_line,
        content=content,
        categories=_category_list(),
    )
