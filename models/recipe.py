"""
Recipe Models

Contains the Recipe and RecipeIngredient models for managing
recipes and their ingredient lists.
"""

from .base import db, isoformat, now


class Recipe(db.Model):
    """Recipe with timing, equipment, tags and its ingredient list."""
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), unique=True, nullable=False, index=True)
    servings = db.Column(db.Integer, default=2, nullable=False)
    servings_max = db.Column(db.Integer, nullable=True)  # upper bound when the recipe scales
    hands_on_min = db.Column(db.Integer, default=15, nullable=False)
    total_min = db.Column(db.Integer, default=30, nullable=False)
    difficulty = db.Column(db.Integer, default=2, nullable=False)  # 1-5

    # Ordered tag lists, e.g. equipment ["OVEN"], tags ["WEEKNIGHT", "vegetarian"]
    equipment = db.Column(db.JSON, default=list, nullable=False)
    tags = db.Column(db.JSON, default=list, nullable=False)
    seasons = db.Column(db.JSON, default=list, nullable=False)  # empty = any season

    instructions = db.Column(db.Text, default='', nullable=False)
    source = db.Column(db.String(20), default='PERSONAL', nullable=False)
    source_ref = db.Column(db.String(500), nullable=True)
    cuisine = db.Column(db.String(50), nullable=True, index=True)
    complexity = db.Column(db.String(20), default='FAMILIAR', nullable=False)
    created_at = db.Column(db.DateTime, default=now, nullable=False)

    ingredients = db.relationship('RecipeIngredient', backref='recipe', lazy=True,
                                  cascade='all, delete-orphan', order_by='RecipeIngredient.id')
    cook_logs = db.relationship('CookLog', backref='recipe', lazy=True,
                                cascade='all, delete-orphan', order_by='CookLog.cooked_on.desc()')
    techniques = db.relationship('RecipeTechnique', backref='recipe', lazy=True,
                                 cascade='all, delete-orphan', order_by='RecipeTechnique.id')

    def summary(self):
        return {'id': self.id, 'title': self.title, 'cuisine': self.cuisine}

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'servings': self.servings,
            'servingsMax': self.servings_max,
            'handsOnMin': self.hands_on_min,
            'totalMin': self.total_min,
            'difficulty': self.difficulty,
            'equipment': list(self.equipment or []),
            'tags': list(self.tags or []),
            'seasons': list(self.seasons or []),
            'instructions': self.instructions,
            'source': self.source,
            'sourceRef': self.source_ref,
            'cuisine': self.cuisine,
            'complexity': self.complexity,
            'createdAt': isoformat(self.created_at),
            'ingredients': [ri.to_dict() for ri in self.ingredients],
            'cookLogs': [log.to_dict() for log in self.cook_logs],
            'techniques': [rt.technique.name for rt in self.techniques if rt.technique],
        }


class RecipeIngredient(db.Model):
    """An ingredient line of a recipe, matched to inventory by normalized name."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    required = db.Column(db.Boolean, default=True, nullable=False)
    quantity_text = db.Column(db.String(100), nullable=True)
    preparation = db.Column(db.String(200), nullable=True)
    substitutions = db.Column(db.JSON, default=list, nullable=False)  # alternates, in preference order

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'required': self.required,
            'quantityText': self.quantity_text,
            'preparation': self.preparation,
            'substitutions': list(self.substitutions or []),
        }
