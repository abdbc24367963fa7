"""
Cost Calculation Service

Estimates what a recipe costs from the prices recorded on inventory items.
"""

from .normalize import norm_name


def item_cost_map(items):
    """
    Map normalized item name -> cost in cents.

    The newest batch's cost wins; items without a priced batch fall back
    to their default cost. Items with neither are left out.
    """
    costs = {}
    for item in items:
        batches = sorted(item.batches, key=lambda b: b.created_at, reverse=True)
        cost = batches[0].cost_cents if batches else None
        if cost is None:
            cost = item.default_cost_cents
        if cost is not None:
            costs[norm_name(item.name)] = cost
    return costs


def calculate_recipe_cost(recipe, items):
    """
    Calculate the cost breakdown of a recipe.

    Returns a JSON-ready dict. `complete` is False when any required
    ingredient has no known price.
    """
    costs = item_cost_map(items)

    ingredient_costs = []
    total_cents = 0
    has_unmatched_required = False

    for ing in recipe.ingredients:
        cost = costs.get(norm_name(ing.name))
        ingredient_costs.append({
            'name': ing.name,
            'costCents': cost,
            'matched': cost is not None,
        })
        if cost is not None:
            total_cents += cost
        elif ing.required:
            has_unmatched_required = True

    cost_per_serving = None
    if recipe.servings and recipe.servings > 0:
        cost_per_serving = int(total_cents / recipe.servings + 0.5)

    return {
        'recipeId': recipe.id,
        'title': recipe.title,
        'servings': recipe.servings,
        'ingredientCosts': ingredient_costs,
        'totalCents': total_cents,
        'costPerServing': cost_per_serving,
        'complete': not has_unmatched_required,
        'matchedCount': len([c for c in ingredient_costs if c['matched']]),
        'totalIngredients': len(ingredient_costs),
    }
