"""
Grocery Model

Contains the GroceryItem model for the shopping list.
"""

from .base import db, isoformat, now


class GroceryItem(db.Model):
    """Grocery list entry with purchase channel and the reason it was added."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    channel = db.Column(db.String(20), default='EITHER', nullable=False)  # SHIP, IN_PERSON, EITHER
    reason = db.Column(db.String(300), nullable=True)  # e.g. "staple_missing"
    checked = db.Column(db.Boolean, default=False, nullable=False)
    # 'manual' (user added) or 'plan' (generated); regeneration only replaces 'plan' rows
    source = db.Column(db.String(20), default='manual', nullable=False)
    created_at = db.Column(db.DateTime, default=now, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'channel': self.channel,
            'reason': self.reason,
            'checked': self.checked,
            'source': self.source,
            'createdAt': isoformat(self.created_at),
        }
