"""
Suggestion Scoring Weights

Point values used by the recipe suggestion scorer. Every rule adds or
subtracts a fixed amount; coverage is the only proportional term.
"""

# Ingredient coverage (fraction of required ingredients on hand) is worth up to this
COVERAGE_WEIGHT = 60
# Flat penalty per missing required ingredient, on top of the coverage loss
MISSING_PENALTY = 12

EXPIRING_BONUS = 12

MUST_USE_HIT_BONUS = 8
MUST_USE_NO_HIT_PENALTY = 8

WITHIN_TIME_BONUS = 8
OVER_TIME_PER_MINUTE = 0.6
OVER_TIME_MAX_PENALTY = 20

EQUIPMENT_MATCH_BONUS = 8
EQUIPMENT_MISMATCH_PENALTY = 25

TAG_INCLUDE_BONUS = 5
TAG_INCLUDE_MISSING_PENALTY = 6
TAG_EXCLUDE_PENALTY = 10

OCCASION_BONUS = 6
OCCASION_MISSING_PENALTY = 3

SEASON_BONUS = 5
SEASON_MISMATCH_PENALTY = 8

CUISINE_MATCH_BONUS = 10
CUISINE_MISMATCH_PENALTY = 15

# Cuisine variety, by days since the cuisine was last cooked
NEW_CUISINE_BONUS = 15
VARIETY_BONUS = 8
VARIETY_STALE_DAYS = 21
RECENT_CUISINE_PENALTY = 4
RECENT_CUISINE_DAYS = 7

COMPLEXITY_MATCH_BONUS = 8
COMPLEXITY_MISMATCH_PENALTY = 5

# Technique growth: techniques below COMFORT_MASTERED are learning opportunities
COMFORT_LEARNING = 1
COMFORT_MASTERED = 2
LEARN_BONUS_PER_TECHNIQUE = 6
LEARN_BONUS_MAX = 15
PRACTICE_BONUS = 4

# Cook history
NEUTRAL_RATING = 3
RATING_WEIGHT = 6
RECENTLY_COOKED_DAYS = 14
RECENTLY_COOKED_PENALTY = 6
HIGH_RATING = 4
NO_REPEAT_PENALTY = 8
FAVORITE_BONUS = 4
