"""
Services Package

Business logic modules for the kitchen application.
"""

from .normalize import (
    norm_name,
    uniq,
)

from .inventory import (
    build_snapshot,
    describe_batch,
    expiration_status,
    format_expiration,
)

from .history import (
    build_cuisine_history,
    build_technique_comfort,
)

from .scoring import (
    SCORING_RULES,
    coverage_ratio,
    match_ingredients,
    score_recipe,
)

from .ranking import (
    passes_filters,
    rank_recipes,
    suggest,
)

from .grocery import (
    plan_grocery_list,
    regenerate_grocery_list,
)

from .cost import (
    calculate_recipe_cost,
    item_cost_map,
)

from .stats import (
    cooking_stats,
)

__all__ = [
    # Normalization
    'norm_name',
    'uniq',
    # Inventory
    'build_snapshot',
    'describe_batch',
    'expiration_status',
    'format_expiration',
    # History
    'build_cuisine_history',
    'build_technique_comfort',
    # Scoring
    'SCORING_RULES',
    'coverage_ratio',
    'match_ingredients',
    'score_recipe',
    # Ranking
    'passes_filters',
    'rank_recipes',
    'suggest',
    # Grocery
    'plan_grocery_list',
    'regenerate_grocery_list',
    # Cost
    'calculate_recipe_cost',
    'item_cost_map',
    # Stats
    'cooking_stats',
]
