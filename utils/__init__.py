# Utility modules for the kitchen app
from .sanitizer import sanitize_text, sanitize_multiline
from .validation import (
    ValidationError,
    parse_cook_log_payload,
    parse_date_param,
    parse_datetime,
    parse_grocery_item_payload,
    parse_grocery_plan_payload,
    parse_inventory_payload,
    parse_meal_plan_payload,
    parse_recipe_payload,
    parse_suggest_payload,
    parse_technique_comfort_payload,
    parse_technique_payload,
)
