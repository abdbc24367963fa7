"""
Validation Constants

Whitelist values for validating user input and maximum field lengths.
"""

# Inventory item categories and storage locations
VALID_ITEM_CATEGORIES = (
    'PANTRY', 'SPICE', 'FROZEN', 'PRODUCE', 'MEAT',
    'DAIRY', 'CONDIMENT', 'BAKING', 'BEVERAGE', 'OTHER'
)
VALID_ITEM_LOCATIONS = ('PANTRY', 'FRIDGE', 'FREEZER', 'COUNTER', 'OTHER')

# Where a grocery item is bought
VALID_GROCERY_CHANNELS = ('SHIP', 'IN_PERSON', 'EITHER')

# Where a recipe came from
VALID_RECIPE_SOURCES = ('PERSONAL', 'FAMILY', 'WEB', 'COOKBOOK', 'FRIEND')

# Recipe complexity relative to the cook's current skills
VALID_COMPLEXITIES = ('FAMILIAR', 'STRETCH', 'CHALLENGE')

# Suggestion request enums ('ANY' disables the filter)
VALID_OCCASIONS = ('WEEKNIGHT', 'POTLUCK', 'MEAL_PREP', 'ANY')
VALID_COMPLEXITY_FILTERS = VALID_COMPLEXITIES + ('ANY',)
VALID_SEASONS = ('SPRING', 'SUMMER', 'FALL', 'WINTER')

# Meal plan slots
VALID_MEAL_SLOTS = ('breakfast', 'lunch', 'dinner')

# Numeric ranges
RATING_RANGE = (1, 5)
DIFFICULTY_RANGE = (1, 5)
COMFORT_RANGE = (0, 3)

# Maximum field lengths
MAX_LENGTHS = {
    'item_name': 200,
    'quantity_text': 100,
    'recipe_title': 200,
    'ingredient_name': 200,
    'preparation': 200,
    'instructions': 50000,
    'source_ref': 500,
    'cuisine': 50,
    'technique_name': 100,
    'description': 500,
    'notes': 2000,
    'tag': 50,
    'reason': 300,
}
