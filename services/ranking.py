"""
Recipe Ranking Service

Filters recipes by the hard constraints (servings window, technique
allow-list), scores the rest and returns the top N.
"""

import logging

from sqlalchemy.orm import selectinload

from .history import build_cuisine_history, build_technique_comfort
from .inventory import build_snapshot
from .normalize import norm_name
from .scoring import recipe_techniques, score_recipe

logger = logging.getLogger(__name__)

# Requested servings may fall this far outside a recipe's servings range
SERVINGS_SLACK = 2


def passes_filters(recipe, constraints):
    """True if the recipe survives the servings window and technique filter."""
    servings = constraints.get('servings')
    if servings and recipe.servings:
        min_serves = recipe.servings
        max_serves = recipe.servings_max or recipe.servings
        if not (min_serves - SERVINGS_SLACK <= servings <= max_serves + SERVINGS_SLACK):
            return False

    wanted = [norm_name(t) for t in (constraints.get('techniques') or [])]
    if wanted:
        names = [norm_name(t.name) for t in recipe_techniques(recipe)]
        if not any(t in names for t in wanted):
            return False

    return True


def rank_recipes(recipes, in_stock, expiring, constraints,
                 cuisine_history=None, technique_comfort=None, now=None, limit=10):
    """
    Score every recipe that passes the filters and return the best `limit`.

    The sort is stable, so recipes with equal scores keep their input order.
    """
    candidates = [r for r in recipes if passes_filters(r, constraints)]
    scored = [
        score_recipe(r, in_stock, expiring, constraints,
                     cuisine_history=cuisine_history,
                     technique_comfort=technique_comfort,
                     now=now)
        for r in candidates
    ]
    scored.sort(key=lambda result: result['score'], reverse=True)
    logger.debug("Ranked %d of %d recipes", len(scored), len(recipes))
    return scored[:limit]


def suggest(constraints, Item, Recipe, RecipeTechnique, Technique,
            horizon_days=5, limit=10, now=None):
    """
    Run one suggestion request against the database.

    Loads inventory and recipes, builds the snapshot and (only when asked
    for) the history maps, then ranks. Recipes are loaded in id order, which
    is the tie-break order for equal scores.
    """
    items = Item.query.options(selectinload(Item.batches)).all()
    in_stock, expiring = build_snapshot(items, horizon_days=horizon_days, now=now)

    recipes = Recipe.query.options(
        selectinload(Recipe.ingredients),
        selectinload(Recipe.cook_logs),
        selectinload(Recipe.techniques).selectinload(RecipeTechnique.technique),
    ).order_by(Recipe.id).all()

    cuisine_history = build_cuisine_history(recipes) if constraints.get('want_variety') else None
    technique_comfort = None
    if constraints.get('want_growth'):
        technique_comfort = build_technique_comfort(Technique.query.all())

    logger.info("Suggesting from %d recipes (%d items in stock, %d expiring)",
                len(recipes), len(in_stock), len(expiring))
    return rank_recipes(recipes, in_stock, expiring, constraints,
                        cuisine_history=cuisine_history,
                        technique_comfort=technique_comfort,
                        now=now, limit=limit)
