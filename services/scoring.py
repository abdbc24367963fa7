"""
Recipe Suggestion Scoring Service

Scores one recipe against the current inventory and the caller's
constraints. The score is a sum of independent rules; each rule looks at
the recipe and a ScoringContext and returns (points, reasons). Rule order
only decides the order of the "why" strings, never the total.

Constraints are a dict with snake_case keys (see utils.validation):
servings, max_total_min, equipment, tags_include, tags_exclude, must_use,
occasion, cuisine, want_variety, want_growth, complexity, season, techniques.
"""

import math
from datetime import datetime

from constants import scoring as weights
from .normalize import norm_name

SECONDS_PER_DAY = 24 * 60 * 60


class ScoringContext:
    """Everything a rule may read besides the recipe itself."""

    def __init__(self, match, in_stock, expiring, constraints,
                 cuisine_history=None, technique_comfort=None, now=None):
        self.match = match
        self.in_stock = in_stock
        self.expiring = expiring
        self.constraints = constraints or {}
        self.cuisine_history = cuisine_history
        self.technique_comfort = technique_comfort
        self.now = now or datetime.now()

    def days_since(self, when):
        return (self.now - when).total_seconds() / SECONDS_PER_DAY


# ============================================
# INGREDIENT MATCHING
# ============================================

def match_ingredients(recipe, in_stock):
    """
    Split a recipe's ingredients into have/missing against in-stock names.

    A required ingredient on hand is "have". Otherwise its substitutions are
    tried in order and the first one on hand satisfies it, recorded as a swap.
    Otherwise it is missing and all of its substitutions are offered as swaps.
    Optional ingredients never count as have or missing.
    """
    required = [i for i in recipe.ingredients if i.required]
    optional = [i for i in recipe.ingredients if not i.required]

    have = []
    missing = []
    swaps = {}

    for ing in required:
        if norm_name(ing.name) in in_stock:
            have.append(ing.name)
            continue

        subs = [s for s in (ing.substitutions or []) if s]
        hit = next((s for s in subs if norm_name(s) in in_stock), None)
        if hit is not None:
            have.append(f"{ing.name} (swap: {hit})")
            swaps[ing.name] = [hit]
        else:
            missing.append(ing.name)
            if subs:
                swaps[ing.name] = subs

    return {
        'required': required,
        'optional': optional,
        'have': have,
        'missing': missing,
        'swaps': swaps,
    }


def coverage_ratio(required_count, missing_count):
    """Fraction of required ingredients satisfied; 1.0 when nothing is required."""
    denominator = max(required_count, 1)
    return (denominator - missing_count) / denominator


def _has_tag(recipe, tag):
    return norm_name(tag) in [norm_name(t) for t in (recipe.tags or [])]


def _has_season(recipe, season):
    seasons = recipe.seasons or []
    if not seasons:
        return True  # no seasons listed = good any time of year
    return norm_name(season) in [norm_name(s) for s in seasons]


def _has_equipment(recipe, required_equipment):
    equipment = [norm_name(e) for e in (recipe.equipment or [])]
    return all(norm_name(e) in equipment for e in required_equipment)


def _round_half_up(value, ndigits=1):
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


# ============================================
# SCORING RULES
# ============================================

def coverage_rule(recipe, ctx):
    coverage = coverage_ratio(len(ctx.match['required']), len(ctx.match['missing']))
    percent = int(_round_half_up(coverage * 100, 0))
    return coverage * weights.COVERAGE_WEIGHT, [f"Coverage {percent}%"]


def missing_rule(recipe, ctx):
    missing_count = len(ctx.match['missing'])
    if not missing_count:
        return 0, []
    return -missing_count * weights.MISSING_PENALTY, [f"Missing {missing_count} required"]


def expiring_rule(recipe, ctx):
    ingredients = ctx.match['required'] + ctx.match['optional']
    if any(norm_name(i.name) in ctx.expiring for i in ingredients):
        return weights.EXPIRING_BONUS, ["Uses expiring item"]
    return 0, []


def must_use_rule(recipe, ctx):
    must_use = [norm_name(m) for m in (ctx.constraints.get('must_use') or [])]
    if not must_use:
        return 0, []
    recipe_names = [norm_name(i.name) for i in ctx.match['required'] + ctx.match['optional']]
    hits = len([m for m in must_use if m in recipe_names])
    if hits == 0:
        return -weights.MUST_USE_NO_HIT_PENALTY, []
    return hits * weights.MUST_USE_HIT_BONUS, [f"Hits {hits}/{len(must_use)} must-use"]


def time_rule(recipe, ctx):
    max_total_min = ctx.constraints.get('max_total_min')
    if max_total_min is None:
        return 0, []
    delta = recipe.total_min - max_total_min
    if delta <= 0:
        return weights.WITHIN_TIME_BONUS, ["Within time"]
    penalty = min(weights.OVER_TIME_MAX_PENALTY, delta * weights.OVER_TIME_PER_MINUTE)
    return -penalty, [f"Over time by {delta}m"]


def equipment_rule(recipe, ctx):
    equipment = ctx.constraints.get('equipment') or []
    if not equipment:
        return 0, []
    if _has_equipment(recipe, equipment):
        return weights.EQUIPMENT_MATCH_BONUS, ["Equipment match"]
    return -weights.EQUIPMENT_MISMATCH_PENALTY, ["Equipment mismatch"]


def tags_rule(recipe, ctx):
    points = 0
    for tag in ctx.constraints.get('tags_include') or []:
        if _has_tag(recipe, tag):
            points += weights.TAG_INCLUDE_BONUS
        else:
            points -= weights.TAG_INCLUDE_MISSING_PENALTY
    for tag in ctx.constraints.get('tags_exclude') or []:
        if _has_tag(recipe, tag):
            points -= weights.TAG_EXCLUDE_PENALTY
    return points, []


def occasion_rule(recipe, ctx):
    occasion = ctx.constraints.get('occasion')
    if not occasion or occasion == 'ANY':
        return 0, []
    if _has_tag(recipe, occasion):
        return weights.OCCASION_BONUS, []
    return -weights.OCCASION_MISSING_PENALTY, []


def season_rule(recipe, ctx):
    season = ctx.constraints.get('season')
    if not season:
        return 0, []
    if _has_season(recipe, season):
        return weights.SEASON_BONUS, ["In season"]
    return -weights.SEASON_MISMATCH_PENALTY, []


def cuisine_rule(recipe, ctx):
    cuisine = ctx.constraints.get('cuisine')
    if not cuisine:
        return 0, []
    if recipe.cuisine and norm_name(recipe.cuisine) == norm_name(cuisine):
        return weights.CUISINE_MATCH_BONUS, [f"Cuisine: {recipe.cuisine}"]
    return -weights.CUISINE_MISMATCH_PENALTY, []


def variety_rule(recipe, ctx):
    if not ctx.constraints.get('want_variety') or ctx.cuisine_history is None or not recipe.cuisine:
        return 0, []
    last_cooked = ctx.cuisine_history.get(norm_name(recipe.cuisine))
    if last_cooked is None:
        return weights.NEW_CUISINE_BONUS, ["New cuisine!"]
    days_ago = ctx.days_since(last_cooked)
    if days_ago > weights.VARIETY_STALE_DAYS:
        return weights.VARIETY_BONUS, ["Cuisine variety"]
    if days_ago < weights.RECENT_CUISINE_DAYS:
        return -weights.RECENT_CUISINE_PENALTY, []
    return 0, []


def complexity_rule(recipe, ctx):
    complexity = ctx.constraints.get('complexity')
    if not complexity or complexity == 'ANY':
        return 0, []
    if recipe.complexity == complexity:
        return weights.COMPLEXITY_MATCH_BONUS, [f"Complexity: {recipe.complexity.lower()}"]
    return -weights.COMPLEXITY_MISMATCH_PENALTY, []


def growth_rule(recipe, ctx):
    techniques = recipe_techniques(recipe)
    if not ctx.constraints.get('want_growth') or ctx.technique_comfort is None or not techniques:
        return 0, []

    comfort = [(t, ctx.technique_comfort.get(norm_name(t.name), 0)) for t in techniques]
    learning = [t for t, level in comfort if level < weights.COMFORT_MASTERED]
    if learning:
        bonus = min(len(learning) * weights.LEARN_BONUS_PER_TECHNIQUE, weights.LEARN_BONUS_MAX)
        return bonus, ["Learn: " + ", ".join(t.name for t in learning)]

    # Comfort "learning" is below "mastered", so with the current thresholds
    # any practice technique is already a learning opportunity above.
    if any(level == weights.COMFORT_LEARNING for _, level in comfort):
        return weights.PRACTICE_BONUS, ["Practice opportunity"]
    return 0, []


def history_rule(recipe, ctx):
    logs = list(recipe.cook_logs or [])
    if not logs:
        return 0, []

    points = 0
    reasons = []

    avg = sum(log.rating for log in logs) / len(logs)
    points += (avg - weights.NEUTRAL_RATING) * weights.RATING_WEIGHT

    last = max(log.cooked_on for log in logs)
    if ctx.days_since(last) < weights.RECENTLY_COOKED_DAYS:
        points -= weights.RECENTLY_COOKED_PENALTY
    if avg >= weights.HIGH_RATING:
        reasons.append("High rated")

    if any(log.would_repeat is False for log in logs):
        points -= weights.NO_REPEAT_PENALTY
        reasons.append("Marked wouldn't repeat")
    elif avg >= weights.HIGH_RATING:
        points += weights.FAVORITE_BONUS
        reasons.append("Favorite")

    return points, reasons


SCORING_RULES = (
    coverage_rule,
    missing_rule,
    expiring_rule,
    must_use_rule,
    time_rule,
    equipment_rule,
    tags_rule,
    occasion_rule,
    season_rule,
    cuisine_rule,
    variety_rule,
    complexity_rule,
    growth_rule,
    history_rule,
)


# ============================================
# SCORER
# ============================================

def recipe_techniques(recipe):
    """Techniques linked to a recipe (through its RecipeTechnique rows)."""
    return [rt.technique for rt in (recipe.techniques or []) if rt.technique is not None]


def score_recipe(recipe, in_stock, expiring, constraints,
                 cuisine_history=None, technique_comfort=None, now=None, rules=SCORING_RULES):
    """
    Score one recipe for the suggestion list.

    Args:
        recipe: Recipe with ingredients, cook_logs and techniques loaded
        in_stock: Set of normalized item names on hand
        expiring: Set of normalized item names with a batch expiring soon
        constraints: Validated suggestion constraints (snake_case dict)
        cuisine_history: Optional {normalized cuisine: last cooked datetime}
        technique_comfort: Optional {normalized technique: comfort 0-3}
        now: Reference time for recency rules (defaults to now)

    Returns:
        JSON-ready dict: recipeId, title, score, have, missing, swaps, why,
        complexity, and cuisine/techniques when the recipe has them.
    """
    match = match_ingredients(recipe, in_stock)
    ctx = ScoringContext(match, in_stock, expiring, constraints,
                         cuisine_history=cuisine_history,
                         technique_comfort=technique_comfort,
                         now=now)

    score = 0
    why = []
    for rule in rules:
        points, reasons = rule(recipe, ctx)
        score += points
        why.extend(reasons)

    result = {
        'recipeId': recipe.id,
        'title': recipe.title,
        'score': _round_half_up(score),
        'have': match['have'],
        'missing': match['missing'],
        'swaps': match['swaps'],
        'why': why,
        'complexity': recipe.complexity,
    }
    if recipe.cuisine:
        result['cuisine'] = recipe.cuisine
    technique_names = [t.name for t in recipe_techniques(recipe)]
    if technique_names:
        result['techniques'] = technique_names
    return result
