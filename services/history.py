"""
Cooking History Service

Folds recipe and technique rows into the lookup maps used by the
variety and growth scoring rules. Both maps are rebuilt per request.
"""

from .normalize import norm_name


def build_cuisine_history(recipes):
    """Map normalized cuisine -> most recent cooked_on across its recipes' cook logs."""
    history = {}
    for recipe in recipes:
        if not recipe.cuisine:
            continue
        cuisine = norm_name(recipe.cuisine)
        for log in recipe.cook_logs:
            existing = history.get(cuisine)
            if existing is None or log.cooked_on > existing:
                history[cuisine] = log.cooked_on
    return history


def build_technique_comfort(techniques):
    """Map normalized technique name -> comfort level (0-3)."""
    return {norm_name(t.name): t.comfort for t in techniques}
