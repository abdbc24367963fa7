"""
Tests for the recipe suggestion scorer.
"""

from datetime import timedelta

from services.scoring import (
    SCORING_RULES,
    _round_half_up,
    coverage_ratio,
    match_ingredients,
    score_recipe,
)


def score(recipe, in_stock=(), expiring=(), constraints=None, **kwargs):
    return score_recipe(recipe, set(in_stock), set(expiring), constraints or {}, **kwargs)


# ============================================
# INGREDIENT MATCHING
# ============================================

class TestMatchIngredients:

    def test_partial_coverage(self, make_recipe, now):
        recipe = make_recipe(ingredients=["rice", "chicken"])
        result = score(recipe, in_stock={"rice"}, now=now)

        assert result["have"] == ["rice"]
        assert result["missing"] == ["chicken"]
        assert result["swaps"] == {}
        # 0.5 coverage * 60, minus 12 for the missing ingredient
        assert result["score"] == 18.0
        assert result["why"] == ["Coverage 50%", "Missing 1 required"]

    def test_substitution_satisfies_required(self, make_recipe, make_ingredient, now):
        recipe = make_recipe(ingredients=[make_ingredient("butter", substitutions=["margarine"])])
        result = score(recipe, in_stock={"margarine"}, now=now)

        assert result["have"] == ["butter (swap: margarine)"]
        assert result["missing"] == []
        assert result["swaps"] == {"butter": ["margarine"]}
        assert result["score"] == 60.0

    def test_direct_match_beats_substitution(self, make_recipe, make_ingredient):
        recipe = make_recipe(ingredients=[make_ingredient("butter", substitutions=["margarine"])])
        match = match_ingredients(recipe, {"butter", "margarine"})

        assert match["have"] == ["butter"]
        assert match["swaps"] == {}

    def test_first_available_substitution_wins(self, make_recipe, make_ingredient):
        recipe = make_recipe(ingredients=[make_ingredient("butter", substitutions=["ghee", "margarine"])])
        match = match_ingredients(recipe, {"margarine", "ghee"})

        assert match["have"] == ["butter (swap: ghee)"]
        assert match["swaps"] == {"butter": ["ghee"]}

    def test_missing_ingredient_offers_all_substitutions(self, make_recipe, make_ingredient):
        recipe = make_recipe(ingredients=[make_ingredient("butter", substitutions=["ghee", "margarine"])])
        match = match_ingredients(recipe, set())

        assert match["missing"] == ["butter"]
        assert match["swaps"] == {"butter": ["ghee", "margarine"]}

    def test_optional_ingredients_are_neither_have_nor_missing(self, make_recipe, make_ingredient):
        recipe = make_recipe(ingredients=["pasta", make_ingredient("parsley", required=False)])
        match = match_ingredients(recipe, {"pasta"})

        assert match["have"] == ["pasta"]
        assert match["missing"] == []
        assert [i.name for i in match["optional"]] == ["parsley"]

    def test_names_are_normalized(self, make_recipe):
        recipe = make_recipe(ingredients=["Canned_Chickpeas"])
        match = match_ingredients(recipe, {"canned chickpeas"})

        assert match["have"] == ["Canned_Chickpeas"]


class TestCoverage:

    def test_zero_required_ingredients_is_full_coverage(self, make_recipe, make_ingredient, now):
        recipe = make_recipe(ingredients=[make_ingredient("parsley", required=False)])
        result = score(recipe, now=now)

        assert coverage_ratio(0, 0) == 1.0
        assert result["score"] == 60.0
        assert result["why"] == ["Coverage 100%"]

    def test_adding_stock_never_lowers_score(self, make_recipe, now):
        recipe = make_recipe(ingredients=["rice", "chicken", "onion"])
        scores = [
            score(recipe, in_stock=stock, now=now)["score"]
            for stock in (set(), {"rice"}, {"rice", "chicken"}, {"rice", "chicken", "onion"})
        ]
        assert scores == sorted(scores)

    def test_each_missing_ingredient_costs_penalty_plus_coverage_share(self, make_recipe, now):
        recipe = make_recipe(ingredients=["rice", "chicken", "onion"])
        scores = [
            score(recipe, in_stock=stock, now=now)["score"]
            for stock in ({"rice", "chicken", "onion"}, {"rice", "chicken"}, {"rice"}, set())
        ]

        assert scores == [60.0, 28.0, -4.0, -36.0]
        # 12 for the missing ingredient plus 60 / 3 of coverage
        assert [a - b for a, b in zip(scores, scores[1:])] == [32.0, 32.0, 32.0]


# ============================================
# CONSTRAINT RULES
# ============================================

class TestConstraintRules:

    def test_over_time_penalty(self, make_recipe, now):
        recipe = make_recipe(total_min=45)
        result = score(recipe, constraints={"max_total_min": 30}, now=now)

        assert result["score"] == 51.0
        assert "Over time by 15m" in result["why"]

    def test_over_time_penalty_is_capped(self, make_recipe, now):
        recipe = make_recipe(total_min=200)
        result = score(recipe, constraints={"max_total_min": 30}, now=now)

        assert result["score"] == 40.0

    def test_within_time(self, make_recipe, now):
        recipe = make_recipe(total_min=30)
        result = score(recipe, constraints={"max_total_min": 30}, now=now)

        assert result["score"] == 68.0
        assert "Within time" in result["why"]

    def test_equipment_mismatch(self, make_recipe, now):
        recipe = make_recipe(equipment=["STOVETOP"])
        result = score(recipe, constraints={"equipment": ["OVEN"]}, now=now)

        assert result["score"] == 35.0
        assert "Equipment mismatch" in result["why"]

    def test_equipment_match_needs_every_piece(self, make_recipe, now):
        recipe = make_recipe(equipment=["OVEN", "STOVETOP"])
        both = score(recipe, constraints={"equipment": ["oven", "stovetop"]}, now=now)
        extra = score(recipe, constraints={"equipment": ["OVEN", "GRILL"]}, now=now)

        assert both["score"] == 68.0
        assert "Equipment match" in both["why"]
        assert extra["score"] == 35.0

    def test_tags_include_and_exclude(self, make_recipe, now):
        recipe = make_recipe(tags=["Vegetarian", "QUICK"])
        result = score(recipe, constraints={
            "tags_include": ["vegetarian", "spicy"],
            "tags_exclude": ["quick"],
        }, now=now)

        # +5 vegetarian, -6 spicy, -10 quick
        assert result["score"] == 49.0

    def test_occasion(self, make_recipe, now):
        recipe = make_recipe(tags=["WEEKNIGHT"])

        assert score(recipe, constraints={"occasion": "WEEKNIGHT"}, now=now)["score"] == 66.0
        assert score(recipe, constraints={"occasion": "POTLUCK"}, now=now)["score"] == 57.0
        assert score(recipe, constraints={"occasion": "ANY"}, now=now)["score"] == 60.0

    def test_recipe_without_seasons_is_always_in_season(self, make_recipe, now):
        result = score(make_recipe(), constraints={"season": "SUMMER"}, now=now)

        assert result["score"] == 65.0
        assert "In season" in result["why"]

    def test_out_of_season(self, make_recipe, now):
        result = score(make_recipe(seasons=["WINTER"]), constraints={"season": "SUMMER"}, now=now)

        assert result["score"] == 52.0
        assert "In season" not in result["why"]

    def test_cuisine_match_is_case_insensitive(self, make_recipe, now):
        recipe = make_recipe(cuisine="Italian")
        match = score(recipe, constraints={"cuisine": "italian"}, now=now)
        mismatch = score(recipe, constraints={"cuisine": "Thai"}, now=now)

        assert match["score"] == 70.0
        assert "Cuisine: Italian" in match["why"]
        assert mismatch["score"] == 45.0

    def test_complexity(self, make_recipe, now):
        recipe = make_recipe(complexity="STRETCH")
        match = score(recipe, constraints={"complexity": "STRETCH"}, now=now)

        assert match["score"] == 68.0
        assert "Complexity: stretch" in match["why"]
        assert score(recipe, constraints={"complexity": "FAMILIAR"}, now=now)["score"] == 55.0
        assert score(recipe, constraints={"complexity": "ANY"}, now=now)["score"] == 60.0

    def test_expiring_bonus_counts_optional_ingredients(self, make_recipe, make_ingredient, now):
        recipe = make_recipe(ingredients=["pasta", make_ingredient("parsley", required=False)])
        result = score(recipe, in_stock={"pasta", "parsley"}, expiring={"parsley"}, now=now)

        assert result["score"] == 72.0
        assert "Uses expiring item" in result["why"]

    def test_must_use(self, make_recipe, now):
        recipe = make_recipe(ingredients=["spinach", "eggs"])
        stock = {"spinach", "eggs"}

        hit = score(recipe, in_stock=stock, constraints={"must_use": ["Spinach", "tofu"]}, now=now)
        miss = score(recipe, in_stock=stock, constraints={"must_use": ["tofu"]}, now=now)

        assert hit["score"] == 68.0
        assert "Hits 1/2 must-use" in hit["why"]
        assert miss["score"] == 52.0


    def test_repeated_must_use_entries_each_count(self, make_recipe, now):
        recipe = make_recipe(ingredients=["rice"], tags=["quick"])
        result = score(recipe, in_stock={"rice"}, constraints={
            "must_use": ["rice", "rice"],
            "tags_exclude": ["quick", "quick"],
        }, now=now)

        # +8 per must-use hit, -10 per excluded tag
        assert result["score"] == 56.0
        assert "Hits 2/2 must-use" in result["why"]


# ============================================
# HISTORY RULES
# ============================================

class TestVariety:

    def test_new_cuisine(self, make_recipe, now):
        recipe = make_recipe(cuisine="Mexican")
        result = score(recipe, constraints={"want_variety": True}, cuisine_history={}, now=now)

        assert result["score"] == 75.0
        assert "New cuisine!" in result["why"]
        assert result["cuisine"] == "Mexican"

    def test_stale_cuisine(self, make_recipe, now):
        recipe = make_recipe(cuisine="Mexican")
        history = {"mexican": now - timedelta(days=30)}
        result = score(recipe, constraints={"want_variety": True}, cuisine_history=history, now=now)

        assert result["score"] == 68.0
        assert "Cuisine variety" in result["why"]

    def test_recent_cuisine(self, make_recipe, now):
        recipe = make_recipe(cuisine="Mexican")
        recent = {"mexican": now - timedelta(days=3)}
        middling = {"mexican": now - timedelta(days=10)}

        assert score(recipe, constraints={"want_variety": True},
                     cuisine_history=recent, now=now)["score"] == 56.0
        assert score(recipe, constraints={"want_variety": True},
                     cuisine_history=middling, now=now)["score"] == 60.0

    def test_no_history_map_means_no_variety_rule(self, make_recipe, now):
        recipe = make_recipe(cuisine="Mexican")
        result = score(recipe, constraints={"want_variety": True}, now=now)

        assert result["score"] == 60.0


class TestGrowth:

    def test_learning_techniques(self, make_recipe, now):
        recipe = make_recipe(techniques=["Braising", "Deglazing"])
        comfort = {"braising": 0, "deglazing": 3}
        result = score(recipe, constraints={"want_growth": True}, technique_comfort=comfort, now=now)

        assert result["score"] == 66.0
        assert "Learn: Braising" in result["why"]
        assert result["techniques"] == ["Braising", "Deglazing"]

    def test_learning_bonus_is_capped(self, make_recipe, now):
        recipe = make_recipe(techniques=["a", "b", "c"])
        result = score(recipe, constraints={"want_growth": True}, technique_comfort={}, now=now)

        assert result["score"] == 75.0
        assert "Learn: a, b, c" in result["why"]

    def test_learning_comfort_gets_learn_bonus_not_practice(self, make_recipe, now):
        recipe = make_recipe(techniques=["braising"])
        result = score(recipe, constraints={"want_growth": True},
                       technique_comfort={"braising": 1}, now=now)

        assert result["score"] == 66.0
        assert "Learn: braising" in result["why"]
        assert "Practice opportunity" not in result["why"]

    def test_mastered_techniques_earn_nothing(self, make_recipe, now):
        recipe = make_recipe(techniques=["roasting"])
        result = score(recipe, constraints={"want_growth": True},
                       technique_comfort={"roasting": 2}, now=now)

        assert result["score"] == 60.0
        assert "Practice opportunity" not in result["why"]


class TestCookHistory:

    def test_favorite(self, make_recipe, make_log, now):
        logs = [make_log(5, now - timedelta(days=30)), make_log(5, now - timedelta(days=40))]
        result = score(make_recipe(cook_logs=logs), now=now)

        # (5 - 3) * 6 + 4
        assert result["score"] == 76.0
        assert result["why"][-2:] == ["High rated", "Favorite"]

    def test_wouldnt_repeat_excludes_favorite(self, make_recipe, make_log, now):
        logs = [make_log(5, now - timedelta(days=30)), make_log(5, now - timedelta(days=40), would_repeat=False)]
        result = score(make_recipe(cook_logs=logs), now=now)

        assert result["score"] == 64.0
        assert "Marked wouldn't repeat" in result["why"]
        assert "Favorite" not in result["why"]

    def test_recently_cooked_penalty(self, make_recipe, make_log, now):
        logs = [make_log(3, now - timedelta(days=3))]
        result = score(make_recipe(cook_logs=logs), now=now)

        assert result["score"] == 54.0


# ============================================
# SCORER
# ============================================

class TestScoreRecipe:

    def test_result_shape(self, make_recipe, now):
        result = score(make_recipe(id=7, title="Soup"), now=now)

        assert list(result) == ["recipeId", "title", "score", "have", "missing", "swaps", "why", "complexity"]
        assert result["recipeId"] == 7
        assert result["complexity"] == "FAMILIAR"

    def test_score_is_deterministic(self, make_recipe, make_log, now):
        recipe = make_recipe(ingredients=["rice", "chicken"], cuisine="Thai",
                             cook_logs=[make_log(4, now - timedelta(days=20))])
        constraints = {"max_total_min": 20, "want_variety": True, "tags_include": ["quick"]}

        first = score(recipe, {"rice"}, set(), constraints, cuisine_history={}, now=now)
        second = score(recipe, {"rice"}, set(), constraints, cuisine_history={}, now=now)
        assert first == second

    def test_score_is_rounded_to_one_decimal(self, make_recipe, now):
        result = score(make_recipe(total_min=31), constraints={"max_total_min": 30}, now=now)
        assert result["score"] == 59.4

    def test_round_half_up(self):
        assert _round_half_up(2.25) == 2.3
        assert _round_half_up(2.24) == 2.2
        assert _round_half_up(49.5, 0) == 50

    def test_custom_rule_table(self, make_recipe, now):
        recipe = make_recipe(ingredients=["rice", "chicken"])
        result = score_recipe(recipe, {"rice"}, set(), {}, now=now, rules=SCORING_RULES[:1])

        assert result["score"] == 30.0
        assert result["why"] == ["Coverage 50%"]
