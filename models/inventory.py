"""
Inventory Models

Contains the Item and ItemBatch models for tracking what is on hand
and when each purchase expires.
"""

from .base import db, isoformat, now


class Item(db.Model):
    """
    Something kept in the kitchen. The name is stored normalized so that
    "Canned Chickpeas" and "canned-chickpeas" are the same item.
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), unique=True, nullable=False, index=True)
    category = db.Column(db.String(20), default='OTHER', nullable=False)
    location = db.Column(db.String(20), default='PANTRY', nullable=False)

    # Staples should always be on hand; missing staples land on the grocery list
    staple = db.Column(db.Boolean, default=False, nullable=False)
    par_level = db.Column(db.Integer, nullable=True)
    default_cost_cents = db.Column(db.Integer, nullable=True)
    created_at = db.Column(db.DateTime, default=now, nullable=False)

    batches = db.relationship('ItemBatch', backref='item', lazy=True,
                              cascade='all, delete-orphan',
                              order_by='ItemBatch.created_at.desc()')

    def to_dict(self, batches=None):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'location': self.location,
            'staple': self.staple,
            'parLevel': self.par_level,
            'defaultCostCents': self.default_cost_cents,
            'createdAt': isoformat(self.created_at),
            'batches': batches if batches is not None else [b.to_dict() for b in self.batches],
        }


class ItemBatch(db.Model):
    """A single purchase of an item, with free-form quantity and optional expiry."""
    id = db.Column(db.Integer, primary_key=True)
    item_id = db.Column(db.Integer, db.ForeignKey('item.id', ondelete='CASCADE'), nullable=False, index=True)
    quantity_text = db.Column(db.String(100), nullable=False)
    expires_on = db.Column(db.DateTime, nullable=True)
    purchased_on = db.Column(db.DateTime, default=now)
    cost_cents = db.Column(db.Integer, nullable=True)
    created_at = db.Column(db.DateTime, default=now, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'itemId': self.item_id,
            'quantityText': self.quantity_text,
            'expiresOn': isoformat(self.expires_on),
            'purchasedOn': isoformat(self.purchased_on),
            'costCents': self.cost_cents,
            'createdAt': isoformat(self.created_at),
        }
