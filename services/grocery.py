"""
Grocery List Service

Works out what needs buying: required ingredients of chosen recipes that
are not in stock, plus staples that have run out.
"""

import logging

from sqlalchemy.orm import selectinload

from .normalize import norm_name

logger = logging.getLogger(__name__)


def plan_grocery_list(items, recipes, include_staples=True):
    """
    Build the needed-items map.

    Args:
        items: Inventory items with batches loaded
        recipes: Recipes to shop for (may be empty)
        include_staples: Also add staples with no batches left

    Returns:
        Dict of normalized name -> {'channel', 'reason'}, in discovery order.
        A name needed for several reasons keeps the last one.
    """
    in_stock = {norm_name(i.name) for i in items}
    needed = {}

    for recipe in recipes:
        for ing in recipe.ingredients:
            if not ing.required:
                continue
            name = norm_name(ing.name)
            if name not in in_stock:
                needed[name] = {'channel': 'IN_PERSON', 'reason': f"missing_for_recipe:{recipe.title}"}

    if include_staples:
        # par_level is not compared: batch quantities are free text
        for item in items:
            if item.staple and not item.batches:
                needed[norm_name(item.name)] = {'channel': 'SHIP', 'reason': 'staple_missing'}

    return needed


def regenerate_grocery_list(recipe_ids, include_staples, db, Item, Recipe, GroceryItem):
    """
    Replace the generated part of the grocery list.

    Manual entries are preserved; previously planned entries are deleted
    and re-created from plan_grocery_list().
    Returns the number of planned entries created.
    """
    items = Item.query.options(selectinload(Item.batches)).all()
    recipes = []
    if recipe_ids:
        recipes = Recipe.query.options(selectinload(Recipe.ingredients)).filter(
            Recipe.id.in_(recipe_ids)).order_by(Recipe.id).all()

    needed = plan_grocery_list(items, recipes, include_staples=include_staples)

    GroceryItem.query.filter(GroceryItem.source != 'manual').delete(synchronize_session=False)
    for name, meta in needed.items():
        db.session.add(GroceryItem(name=name, channel=meta['channel'],
                                   reason=meta['reason'], source='plan'))
    db.session.commit()

    logger.info("Grocery list regenerated: %d planned items from %d recipes", len(needed), len(recipes))
    return len(needed)
