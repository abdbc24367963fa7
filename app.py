import logging
import sqlite3

import click
from flask import Flask, jsonify, request
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import joinedload, selectinload

from config import get_config
from constants import SEED_ITEMS, SEED_RECIPES, SEED_TECHNIQUES
from models import (
    db, Item, ItemBatch, Recipe, RecipeIngredient, Technique, RecipeTechnique,
    CookLog, MealPlan, GroceryItem,
)
from services import (
    build_snapshot, calculate_recipe_cost, cooking_stats, describe_batch,
    norm_name, regenerate_grocery_list, suggest, uniq,
)
from models.base import now
from utils.validation import (
    ValidationError,
    parse_cook_log_payload,
    parse_date_param,
    parse_grocery_item_payload,
    parse_grocery_plan_payload,
    parse_inventory_payload,
    parse_meal_plan_payload,
    parse_recipe_payload,
    parse_suggest_payload,
    parse_technique_comfort_payload,
    parse_technique_payload,
)

app = Flask(__name__)
app.config.from_object(get_config())
app.json.sort_keys = False

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)


# Enable SQLite foreign key enforcement
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ============================================
# ERROR HANDLING
# ============================================

@app.errorhandler(ValidationError)
def handle_validation_error(error):
    logger.warning("Rejected %s %s: %s", request.method, request.path, error.field_errors or error.form_errors)
    return jsonify({'error': error.to_dict()}), 400


@app.errorhandler(404)
def handle_not_found(error):
    return jsonify({'error': 'Not found'}), 404


@app.errorhandler(405)
def handle_method_not_allowed(error):
    return jsonify({'error': 'Method not allowed'}), 405


def json_body():
    """Request JSON, or None if the body is missing or not JSON."""
    return request.get_json(silent=True)


# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    items = Item.query.options(selectinload(Item.batches)).all()
    in_stock, expiring = build_snapshot(items, horizon_days=app.config['EXPIRING_HORIZON_DAYS'])
    return jsonify({
        'items': len(in_stock),
        'recipes': Recipe.query.count(),
        'techniques': Technique.query.count(),
        'expiring': sorted(expiring),
    })


# ============================================
# ROUTES - INVENTORY
# ============================================

def _add_batch(item, batch):
    item.batches.append(ItemBatch(
        quantity_text=batch['quantity_text'],
        expires_on=batch['expires_on'],
        purchased_on=batch['purchased_on'] or now(),
        cost_cents=batch['cost_cents'],
    ))


def _apply_item_fields(item, data):
    """Copy optional item fields that were sent; absent fields keep their value."""
    for field in ('category', 'location', 'staple', 'par_level', 'default_cost_cents'):
        if data.get(field) is not None:
            setattr(item, field, data[field])


@app.route('/api/inventory/items', methods=['GET'])
def inventory_list():
    items = Item.query.options(selectinload(Item.batches)).order_by(Item.name).all()
    warning_days = app.config['EXPIRATION_WARNING_DAYS']
    current = now()
    return jsonify({'items': [
        item.to_dict(batches=[describe_batch(b, current, warning_days) for b in item.batches])
        for item in items
    ]})


@app.route('/api/inventory/items', methods=['POST'])
def inventory_add():
    """Create an item (or update the one with the same normalized name), optionally adding a batch."""
    data, batch = parse_inventory_payload(json_body())
    name = norm_name(data['name'])

    item = Item.query.filter_by(name=name).first()
    if item is None:
        item = Item(name=name, staple=False)
        db.session.add(item)
        logger.info("Created inventory item %r", name)
    _apply_item_fields(item, data)

    if batch is not None:
        _add_batch(item, batch)
    db.session.commit()
    return jsonify({'item': item.to_dict()})


@app.route('/api/inventory/items/<int:id>', methods=['PUT'])
def inventory_update(id):
    item = db.get_or_404(Item, id)
    data, batch = parse_inventory_payload(json_body(), update=True)

    name = norm_name(data['name'])
    clash = Item.query.filter(Item.name == name, Item.id != item.id).first()
    if clash is not None:
        raise ValidationError({'item.name': [f'An item named "{name}" already exists']})
    item.name = name
    _apply_item_fields(item, data)

    if batch is not None:
        if batch.get('id'):
            existing = ItemBatch.query.filter_by(id=batch['id'], item_id=item.id).first_or_404()
            existing.quantity_text = batch['quantity_text']
            existing.cost_cents = batch['cost_cents']
            if batch['expires_on'] is not None:
                existing.expires_on = batch['expires_on']
        else:
            _add_batch(item, batch)

    db.session.commit()
    logger.info("Updated inventory item %d (%r)", item.id, item.name)
    return jsonify({'item': item.to_dict()})


@app.route('/api/inventory/items/<int:id>', methods=['DELETE'])
def inventory_delete(id):
    item = db.get_or_404(Item, id)
    db.session.delete(item)
    db.session.commit()
    logger.info("Deleted inventory item %d", id)
    return jsonify({'success': True})


@app.route('/api/inventory/batches/<int:id>', methods=['DELETE'])
def inventory_batch_delete(id):
    """Remove one batch, e.g. when it has been used up."""
    batch = db.get_or_404(ItemBatch, id)
    db.session.delete(batch)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# ROUTES - RECIPES
# ============================================

RECIPE_DEFAULTS = {
    'servings': 2,
    'hands_on_min': 15,
    'total_min': 30,
    'difficulty': 2,
    'equipment': [],
    'tags': [],
    'seasons': [],
    'source': 'PERSONAL',
    'complexity': 'FAMILIAR',
}

RECIPE_OPTIONAL_FIELDS = (
    'servings', 'servings_max', 'hands_on_min', 'total_min', 'difficulty',
    'equipment', 'tags', 'seasons', 'source', 'source_ref', 'cuisine', 'complexity',
)


def _recipe_query():
    return Recipe.query.options(
        selectinload(Recipe.ingredients),
        selectinload(Recipe.cook_logs),
        selectinload(Recipe.techniques).joinedload(RecipeTechnique.technique),
    )


def resolve_techniques(names):
    """Find or create techniques by normalized name (new ones start untried)."""
    techniques = []
    for name in uniq([norm_name(n) for n in names]):
        technique = Technique.query.filter_by(name=name).first()
        if technique is None:
            technique = Technique(name=name, comfort=0, difficulty=2)
            db.session.add(technique)
            db.session.flush()
            logger.info("Created technique %r", name)
        techniques.append(technique)
    return techniques


def apply_recipe(recipe, data, creating):
    """
    Write validated recipe data onto a Recipe.

    Ingredients and technique links are always replaced. Other optional
    fields fall back to defaults on create and keep their value on update.
    """
    recipe.title = data['title']
    recipe.instructions = data['instructions']
    for field in RECIPE_OPTIONAL_FIELDS:
        value = data.get(field)
        if value is None and creating:
            value = RECIPE_DEFAULTS.get(field)
        if value is not None or creating:
            setattr(recipe, field, value)

    recipe.ingredients = [
        RecipeIngredient(
            name=ing['name'],
            required=ing['required'],
            quantity_text=ing['quantity_text'],
            preparation=ing['preparation'],
            substitutions=ing['substitutions'],
        )
        for ing in data['ingredients']
    ]

    techniques = resolve_techniques(data.get('techniques') or [])

    # Reuse existing links so the (recipe, technique) unique constraint holds.
    # New links are only in the session once assigned to the recipe.
    existing = {rt.technique_id: rt for rt in recipe.techniques}
    with db.session.no_autoflush:
        recipe.techniques = [existing.get(t.id) or RecipeTechnique(technique=t) for t in techniques]


@app.route('/api/recipes', methods=['GET'])
def recipes_list():
    recipes = _recipe_query().order_by(Recipe.title).all()
    return jsonify({'recipes': [r.to_dict() for r in recipes]})


@app.route('/api/recipes/<int:id>', methods=['GET'])
def recipe_view(id):
    recipe = _recipe_query().filter(Recipe.id == id).first_or_404()
    return jsonify({'recipe': recipe.to_dict()})


@app.route('/api/recipes', methods=['POST'])
def recipe_add():
    """Create a recipe, or replace the one with the same title."""
    data = parse_recipe_payload(json_body())

    recipe = Recipe.query.filter_by(title=data['title']).first()
    creating = recipe is None
    if creating:
        recipe = Recipe(title=data['title'])
        db.session.add(recipe)
    apply_recipe(recipe, data, creating=creating)
    db.session.commit()

    logger.info("%s recipe %r", 'Created' if creating else 'Replaced', recipe.title)
    return jsonify({'recipe': recipe.to_dict()})


@app.route('/api/recipes/<int:id>', methods=['PUT'])
def recipe_edit(id):
    recipe = db.get_or_404(Recipe, id)
    data = parse_recipe_payload(json_body())

    clash = Recipe.query.filter(Recipe.title == data['title'], Recipe.id != id).first()
    if clash is not None:
        raise ValidationError({'title': [f'A recipe titled "{data["title"]}" already exists']})

    apply_recipe(recipe, data, creating=False)
    db.session.commit()
    logger.info("Updated recipe %d (%r)", recipe.id, recipe.title)
    return jsonify({'recipe': recipe.to_dict()})


@app.route('/api/recipes/<int:id>', methods=['DELETE'])
def recipe_delete(id):
    recipe = db.get_or_404(Recipe, id)

    # Meal plan entries keep their slot but lose the recipe
    MealPlan.query.filter_by(recipe_id=id).update({'recipe_id': None})

    db.session.delete(recipe)
    db.session.commit()
    logger.info("Deleted recipe %d", id)
    return jsonify({'success': True})


@app.route('/api/recipes/<int:id>/cost', methods=['GET'])
def recipe_cost(id):
    recipe = Recipe.query.options(selectinload(Recipe.ingredients)).filter(Recipe.id == id).first_or_404()
    items = Item.query.options(selectinload(Item.batches)).all()
    return jsonify(calculate_recipe_cost(recipe, items))


# ============================================
# ROUTES - COOK LOGS
# ============================================

@app.route('/api/cooklogs', methods=['GET'])
def cook_logs_list():
    query = CookLog.query.options(joinedload(CookLog.recipe))

    recipe_id = request.args.get('recipeId', type=int)
    if recipe_id:
        query = query.filter(CookLog.recipe_id == recipe_id)
    start = parse_date_param(request.args.get('from'), 'from')
    if start is not None:
        query = query.filter(CookLog.cooked_on >= start)
    end = parse_date_param(request.args.get('to'), 'to')
    if end is not None:
        query = query.filter(CookLog.cooked_on <= end)

    logs = query.order_by(CookLog.cooked_on.desc()).all()
    return jsonify({'logs': [log.to_dict(with_recipe=True) for log in logs]})


@app.route('/api/cooklogs', methods=['POST'])
def cook_log_add():
    data = parse_cook_log_payload(json_body())
    if db.session.get(Recipe, data['recipe_id']) is None:
        raise ValidationError({'recipeId': ['Recipe not found']})

    log = CookLog(
        recipe_id=data['recipe_id'],
        rating=data['rating'],
        notes=data['notes'],
        would_repeat=data['would_repeat'],
        served_to=data['served_to'],
        cooked_on=data['cooked_on'] or now(),
    )
    db.session.add(log)
    db.session.commit()
    logger.info("Logged cook of recipe %d (rating %d)", log.recipe_id, log.rating)
    return jsonify({'log': log.to_dict()})


# ============================================
# ROUTES - TECHNIQUES
# ============================================

@app.route('/api/techniques', methods=['GET'])
def techniques_list():
    techniques = Technique.query.options(
        selectinload(Technique.recipes).joinedload(RecipeTechnique.recipe)
    ).order_by(Technique.name).all()
    return jsonify({'techniques': [t.to_dict(with_recipes=True) for t in techniques]})


@app.route('/api/techniques', methods=['POST'])
def technique_add():
    """Create a technique, or update description/difficulty of an existing one."""
    data = parse_technique_payload(json_body())
    name = norm_name(data['name'])

    technique = Technique.query.filter_by(name=name).first()
    if technique is None:
        technique = Technique(name=name, comfort=0, difficulty=data['difficulty'] or 2,
                              description=data['description'])
        db.session.add(technique)
    else:
        if data['description'] is not None:
            technique.description = data['description']
        if data['difficulty'] is not None:
            technique.difficulty = data['difficulty']
    db.session.commit()
    return jsonify({'technique': technique.to_dict()})


@app.route('/api/techniques/<int:id>', methods=['PATCH'])
def technique_set_comfort(id):
    technique = db.get_or_404(Technique, id)
    technique.comfort = parse_technique_comfort_payload(json_body())
    db.session.commit()
    logger.info("Technique %r comfort set to %d", technique.name, technique.comfort)
    return jsonify({'technique': technique.to_dict()})


# ============================================
# ROUTES - MEAL PLAN
# ============================================

@app.route('/api/mealplan', methods=['GET'])
def meal_plan():
    query = MealPlan.query.options(joinedload(MealPlan.recipe))
    start = parse_date_param(request.args.get('start'), 'start')
    if start is not None:
        query = query.filter(MealPlan.date >= start.date())
    end = parse_date_param(request.args.get('end'), 'end')
    if end is not None:
        query = query.filter(MealPlan.date <= end.date())
    plans = query.order_by(MealPlan.date, MealPlan.slot).all()
    return jsonify({'plans': [p.to_dict() for p in plans]})


@app.route('/api/mealplan', methods=['POST'])
def meal_plan_set():
    """Create or replace the entry for a date and slot."""
    data = parse_meal_plan_payload(json_body())
    if data['recipe_id'] is not None and db.session.get(Recipe, data['recipe_id']) is None:
        raise ValidationError({'recipeId': ['Recipe not found']})

    plan = MealPlan.query.filter_by(date=data['date'], slot=data['slot']).first()
    if plan is None:
        plan = MealPlan(date=data['date'], slot=data['slot'])
        db.session.add(plan)
    plan.recipe_id = data['recipe_id']
    plan.notes = data['notes']
    plan.servings = data['servings']
    db.session.commit()
    return jsonify({'plan': plan.to_dict()})


@app.route('/api/mealplan/<int:id>', methods=['DELETE'])
def meal_plan_delete(id):
    plan = db.get_or_404(MealPlan, id)
    db.session.delete(plan)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# ROUTES - GROCERY LIST
# ============================================

def _grocery_items():
    return GroceryItem.query.order_by(GroceryItem.checked, GroceryItem.created_at.desc(), GroceryItem.id).all()


@app.route('/api/grocery', methods=['GET'])
def grocery_list():
    return jsonify({'items': [g.to_dict() for g in _grocery_items()]})


@app.route('/api/grocery', methods=['POST'])
def grocery_add():
    data = parse_grocery_item_payload(json_body())
    item = GroceryItem(name=norm_name(data['name']), channel=data['channel'],
                       reason=data['reason'], source='manual')
    db.session.add(item)
    db.session.commit()
    return jsonify({'item': item.to_dict()})


@app.route('/api/grocery/plan', methods=['POST'])
def grocery_plan():
    """Regenerate planned grocery items from recipes and missing staples (manual items kept)."""
    data = parse_grocery_plan_payload(json_body())
    created = regenerate_grocery_list(data['recipe_ids'], data['include_staples'],
                                      db, Item, Recipe, GroceryItem)
    return jsonify({'created': created, 'items': [g.to_dict() for g in _grocery_items()]})


@app.route('/api/grocery/<int:id>/check', methods=['POST'])
def grocery_check(id):
    item = db.get_or_404(GroceryItem, id)
    item.checked = not item.checked
    db.session.commit()
    return jsonify({'item': item.to_dict()})


@app.route('/api/grocery/<int:id>', methods=['DELETE'])
def grocery_delete(id):
    item = db.get_or_404(GroceryItem, id)
    db.session.delete(item)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# ROUTES - STATS
# ============================================

@app.route('/api/stats', methods=['GET'])
def stats():
    logs = CookLog.query.options(joinedload(CookLog.recipe)).order_by(CookLog.cooked_on).all()
    techniques = Technique.query.options(
        selectinload(Technique.recipes)
        .joinedload(RecipeTechnique.recipe)
        .selectinload(Recipe.cook_logs)
    ).all()
    return jsonify(cooking_stats(logs, techniques, Recipe.query.count()))


# ============================================
# ROUTES - SUGGESTIONS
# ============================================

@app.route('/api/suggest', methods=['POST'])
def suggest_recipes():
    constraints = parse_suggest_payload(json_body())
    results = suggest(
        constraints, Item, Recipe, RecipeTechnique, Technique,
        horizon_days=app.config['EXPIRING_HORIZON_DAYS'],
        limit=app.config['SUGGEST_LIMIT'],
    )
    return jsonify({'results': results})


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        db.create_all()


def seed_db():
    """
    Load starter techniques, pantry items and sample recipes.

    Safe to run repeatedly: existing rows are updated or left alone.
    Returns (techniques, items, recipes) counts of rows created.
    """
    created = [0, 0, 0]

    for data in SEED_TECHNIQUES:
        technique = Technique.query.filter_by(name=data['name']).first()
        if technique is None:
            db.session.add(Technique(comfort=0, **data))
            created[0] += 1
        else:
            technique.description = data['description']
            technique.difficulty = data['difficulty']
    db.session.flush()

    for name, category, location, staple in SEED_ITEMS:
        item = Item.query.filter_by(name=name).first()
        if item is None:
            item = Item(name=name, category=category, location=location, staple=staple)
            db.session.add(item)
            created[1] += 1
        if not item.batches:
            item.batches.append(ItemBatch(quantity_text='1', purchased_on=now()))

    for data in SEED_RECIPES:
        if Recipe.query.filter_by(title=data['title']).first() is not None:
            continue
        recipe = Recipe(title=data['title'])
        db.session.add(recipe)
        apply_recipe(recipe, {
            **data,
            'ingredients': [
                {'quantity_text': None, 'preparation': None, 'substitutions': [], **ing}
                for ing in data['ingredients']
            ],
        }, creating=True)
        created[2] += 1

    db.session.commit()
    return tuple(created)


@app.cli.command('init-db')
def init_db_command():
    """Create database tables."""
    db.create_all()
    click.echo('Initialized the database.')


@app.cli.command('seed')
def seed_command():
    """Load starter techniques, pantry items and sample recipes."""
    db.create_all()
    techniques, items, recipes = seed_db()
    click.echo(f'Seeded {techniques} techniques, {items} items, {recipes} recipes.')


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
