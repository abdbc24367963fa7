"""
Request Validation Module

Parses JSON request bodies into clean snake_case dicts. Every parser
collects all field problems before raising, so one 400 response lists
every bad field. Request keys are camelCase; error keys use the request
names (nested ones dotted, e.g. "item.name" or "ingredients.0.name").
"""

from datetime import date, datetime

from constants.validation import (
    COMFORT_RANGE,
    DIFFICULTY_RANGE,
    MAX_LENGTHS,
    RATING_RANGE,
    VALID_COMPLEXITIES,
    VALID_COMPLEXITY_FILTERS,
    VALID_GROCERY_CHANNELS,
    VALID_ITEM_CATEGORIES,
    VALID_ITEM_LOCATIONS,
    VALID_MEAL_SLOTS,
    VALID_OCCASIONS,
    VALID_RECIPE_SOURCES,
    VALID_SEASONS,
)
from services.normalize import uniq
from .sanitizer import sanitize_multiline, sanitize_text


class ValidationError(Exception):
    """Raised when a request payload fails validation."""

    def __init__(self, field_errors, form_errors=None):
        super().__init__('Invalid request')
        self.field_errors = field_errors
        self.form_errors = form_errors or []

    def to_dict(self):
        return {'formErrors': self.form_errors, 'fieldErrors': self.field_errors}


def parse_datetime(value):
    """
    Parse an ISO-8601 timestamp into a naive local datetime.

    Accepts a trailing 'Z'. Raises ValueError on bad input.
    """
    if not isinstance(value, str):
        raise ValueError('Expected ISO-8601 string')
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_date_param(value, name):
    """Parse an optional date/datetime query parameter, raising ValidationError."""
    if not value:
        return None
    try:
        return parse_datetime(value)
    except ValueError:
        raise ValidationError({name: ['Invalid date']})


# ============================================
# FIELD HELPERS
# ============================================

class _Fields:
    """Reads typed fields out of one JSON object and records errors."""

    def __init__(self, data, errors, prefix=''):
        self.data = data
        self.errors = errors
        self.prefix = prefix

    def _fail(self, key, message):
        self.errors.setdefault(self.prefix + key, []).append(message)
        return None

    def has(self, key):
        return self.data.get(key) is not None

    def string(self, key, max_key, required=False, multiline=False):
        value = self.data.get(key)
        if value is None:
            return self._fail(key, 'Required') if required else None
        if not isinstance(value, str):
            return self._fail(key, 'Expected string')
        if multiline:
            cleaned = sanitize_multiline(value, MAX_LENGTHS[max_key])
        else:
            cleaned = sanitize_text(value, MAX_LENGTHS[max_key])
        if not cleaned:
            return self._fail(key, 'Required') if required else None
        return cleaned

    def integer(self, key, required=False, min_val=None, max_val=None):
        value = self.data.get(key)
        if value is None:
            return self._fail(key, 'Required') if required else None
        # bool is an int subclass; JSON true/false is not a number here
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return self._fail(key, 'Expected integer')
        if isinstance(value, float):
            if not value.is_integer():
                return self._fail(key, 'Expected integer')
            value = int(value)
        if min_val is not None and value < min_val:
            return self._fail(key, f'Must be at least {min_val}')
        if max_val is not None and value > max_val:
            return self._fail(key, f'Must be at most {max_val}')
        return value

    def positive_int(self, key, required=False):
        return self.integer(key, required=required, min_val=1)

    def boolean(self, key):
        value = self.data.get(key)
        if value is None:
            return None
        if not isinstance(value, bool):
            return self._fail(key, 'Expected boolean')
        return value

    def choice(self, key, choices, required=False):
        value = self.data.get(key)
        if value is None:
            return self._fail(key, 'Required') if required else None
        if value not in choices:
            return self._fail(key, 'Expected one of: ' + ', '.join(choices))
        return value

    def string_list(self, key, max_key='tag', unique=True):
        value = self.data.get(key)
        if value is None:
            return None
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            return self._fail(key, 'Expected list of strings')
        cleaned = [sanitize_text(v, MAX_LENGTHS[max_key]) for v in value]
        cleaned = [v for v in cleaned if v]
        return uniq(cleaned) if unique else cleaned

    def timestamp(self, key):
        value = self.data.get(key)
        if value is None:
            return None
        try:
            return parse_datetime(value)
        except ValueError:
            return self._fail(key, 'Invalid datetime')

    def calendar_date(self, key, required=False):
        value = self.data.get(key)
        if value is None:
            return self._fail(key, 'Required') if required else None
        try:
            if isinstance(value, str) and len(value.strip()) == 10:
                return date.fromisoformat(value.strip())
            return parse_datetime(value).date()
        except ValueError:
            return self._fail(key, 'Invalid date')

    def obj(self, key, required=False):
        value = self.data.get(key)
        if value is None:
            return self._fail(key, 'Required') if required else None
        if not isinstance(value, dict):
            return self._fail(key, 'Expected object')
        return value


def _object(payload):
    if not isinstance(payload, dict):
        raise ValidationError({}, ['Expected a JSON object'])
    return payload


def _finish(errors, result):
    if errors:
        raise ValidationError(errors)
    return result


# ============================================
# INVENTORY
# ============================================

def _parse_item(fields, partial):
    item = {
        'name': fields.string('name', 'item_name', required=True),
        'category': fields.choice('category', VALID_ITEM_CATEGORIES, required=not partial),
        'location': fields.choice('location', VALID_ITEM_LOCATIONS, required=not partial),
        'staple': fields.boolean('staple'),
        'par_level': fields.positive_int('parLevel'),
        'default_cost_cents': fields.integer('defaultCostCents', min_val=0),
    }
    return item


def _parse_batch(fields, allow_id):
    batch = {
        'quantity_text': fields.string('quantityText', 'quantity_text', required=True),
        'expires_on': fields.timestamp('expiresOn'),
        'purchased_on': fields.timestamp('purchasedOn'),
        'cost_cents': fields.integer('costCents', min_val=0),
    }
    if allow_id:
        batch['id'] = fields.positive_int('id')
    return batch


def parse_inventory_payload(payload, update=False):
    """
    Parse `{item, batch?}` for creating (update=False) or updating an item.

    On update only the item name is required. Returns (item, batch or None).
    """
    data = _object(payload)
    errors = {}
    top = _Fields(data, errors)

    item_data = top.obj('item', required=True)
    item = _parse_item(_Fields(item_data, errors, 'item.'), partial=update) if item_data is not None else None

    batch = None
    batch_data = top.obj('batch')
    if batch_data is not None:
        batch = _parse_batch(_Fields(batch_data, errors, 'batch.'), allow_id=update)

    return _finish(errors, (item, batch))


# ============================================
# RECIPES
# ============================================

def parse_recipe_payload(payload):
    """Parse a full recipe body (create and update share the same shape)."""
    data = _object(payload)
    errors = {}
    f = _Fields(data, errors)

    recipe = {
        'title': f.string('title', 'recipe_title', required=True),
        'servings': f.positive_int('servings'),
        'servings_max': f.positive_int('servingsMax'),
        'hands_on_min': f.positive_int('handsOnMin'),
        'total_min': f.positive_int('totalMin'),
        'difficulty': f.integer('difficulty', min_val=DIFFICULTY_RANGE[0], max_val=DIFFICULTY_RANGE[1]),
        'equipment': f.string_list('equipment'),
        'tags': f.string_list('tags'),
        'seasons': f.string_list('seasons'),
        'instructions': f.string('instructions', 'instructions', required=True, multiline=True),
        'source': f.choice('source', VALID_RECIPE_SOURCES),
        'source_ref': f.string('sourceRef', 'source_ref'),
        'cuisine': f.string('cuisine', 'cuisine'),
        'complexity': f.choice('complexity', VALID_COMPLEXITIES),
        'techniques': f.string_list('techniques', 'technique_name'),
    }

    ingredients = []
    raw_ingredients = data.get('ingredients')
    if not isinstance(raw_ingredients, list) or not raw_ingredients:
        errors.setdefault('ingredients', []).append('At least one ingredient is required')
    else:
        for index, raw in enumerate(raw_ingredients):
            prefix = f'ingredients.{index}.'
            if not isinstance(raw, dict):
                errors.setdefault(prefix[:-1], []).append('Expected object')
                continue
            ing = _Fields(raw, errors, prefix)
            required = ing.boolean('required')
            ingredients.append({
                'name': ing.string('name', 'ingredient_name', required=True),
                'required': True if required is None else required,
                'quantity_text': ing.string('quantityText', 'quantity_text'),
                'preparation': ing.string('preparation', 'preparation'),
                'substitutions': ing.string_list('substitutions', 'ingredient_name') or [],
            })
    recipe['ingredients'] = ingredients

    return _finish(errors, recipe)


# ============================================
# COOK LOGS / TECHNIQUES / MEAL PLAN
# ============================================

def parse_cook_log_payload(payload):
    data = _object(payload)
    errors = {}
    f = _Fields(data, errors)
    would_repeat = f.boolean('wouldRepeat')
    log = {
        'recipe_id': f.positive_int('recipeId', required=True),
        'rating': f.integer('rating', required=True, min_val=RATING_RANGE[0], max_val=RATING_RANGE[1]),
        'notes': f.string('notes', 'notes', multiline=True),
        'would_repeat': True if would_repeat is None else would_repeat,
        'served_to': f.positive_int('servedTo'),
        'cooked_on': f.timestamp('cookedOn'),
    }
    return _finish(errors, log)


def parse_technique_payload(payload):
    data = _object(payload)
    errors = {}
    f = _Fields(data, errors)
    technique = {
        'name': f.string('name', 'technique_name', required=True),
        'description': f.string('description', 'description'),
        'difficulty': f.integer('difficulty', min_val=DIFFICULTY_RANGE[0], max_val=DIFFICULTY_RANGE[1]),
    }
    return _finish(errors, technique)


def parse_technique_comfort_payload(payload):
    data = _object(payload)
    errors = {}
    f = _Fields(data, errors)
    comfort = f.integer('comfort', required=True, min_val=COMFORT_RANGE[0], max_val=COMFORT_RANGE[1])
    return _finish(errors, comfort)


def parse_meal_plan_payload(payload):
    data = _object(payload)
    errors = {}
    f = _Fields(data, errors)
    plan = {
        'date': f.calendar_date('date', required=True),
        'slot': f.choice('slot', VALID_MEAL_SLOTS, required=True),
        'recipe_id': f.positive_int('recipeId'),
        'notes': f.string('notes', 'notes'),
        'servings': f.positive_int('servings'),
    }
    return _finish(errors, plan)


# ============================================
# GROCERY
# ============================================

def parse_grocery_plan_payload(payload):
    data = _object(payload if payload is not None else {})
    errors = {}
    f = _Fields(data, errors)

    recipe_ids = data.get('recipeIds')
    if recipe_ids is not None:
        if not isinstance(recipe_ids, list) or not all(
                isinstance(r, int) and not isinstance(r, bool) for r in recipe_ids):
            errors['recipeIds'] = ['Expected list of recipe ids']
            recipe_ids = None

    include_staples = f.boolean('includeStaplesBelowPar')
    return _finish(errors, {
        'recipe_ids': recipe_ids or [],
        'include_staples': True if include_staples is None else include_staples,
    })


def parse_grocery_item_payload(payload):
    data = _object(payload)
    errors = {}
    f = _Fields(data, errors)
    item = {
        'name': f.string('name', 'item_name', required=True),
        'channel': f.choice('channel', VALID_GROCERY_CHANNELS) or 'EITHER',
        'reason': f.string('reason', 'reason'),
    }
    return _finish(errors, item)


# ============================================
# SUGGESTIONS
# ============================================

def parse_suggest_payload(payload):
    """
    Parse suggestion constraints.

    Returns a snake_case dict with only the keys the caller sent, which is
    what services.scoring expects.
    """
    data = _object(payload if payload is not None else {})
    errors = {}
    f = _Fields(data, errors)

    constraints = {
        'servings': f.positive_int('servings'),
        'max_total_min': f.positive_int('maxTotalMin'),
        # Repeats are kept: each entry of these lists is scored on its own
        'equipment': f.string_list('equipment', unique=False),
        'tags_include': f.string_list('tagsInclude', unique=False),
        'tags_exclude': f.string_list('tagsExclude', unique=False),
        'must_use': f.string_list('mustUse', 'ingredient_name', unique=False),
        'occasion': f.choice('occasion', VALID_OCCASIONS),
        'cuisine': f.string('cuisine', 'cuisine'),
        'want_variety': f.boolean('wantVariety'),
        'want_growth': f.boolean('wantGrowth'),
        'complexity': f.choice('complexity', VALID_COMPLEXITY_FILTERS),
        'season': f.choice('season', VALID_SEASONS),
        'techniques': f.string_list('techniques', 'technique_name'),
    }
    return _finish(errors, {k: v for k, v in constraints.items() if v is not None})
