"""
Inventory Service

Builds the per-request inventory snapshot used for matching recipes, and
labels batches by how close they are to expiring.
"""

import math
from datetime import datetime, timedelta

from .normalize import norm_name

SECONDS_PER_DAY = 24 * 60 * 60


def build_snapshot(items, horizon_days=5, now=None):
    """
    Build the sets of item names in stock and expiring soon.

    Args:
        items: Items with `name` and `batches` (each batch has `expires_on`)
        horizon_days: Batches expiring on or before now + horizon_days count as expiring
        now: Reference time (defaults to the current time)

    Returns:
        (in_stock, expiring) as sets of normalized names.

    Every item counts as in stock, even one with no batches left. Expired
    batches also count as expiring: the point is urgency, not freshness.
    """
    if now is None:
        now = datetime.now()
    cutoff = now + timedelta(days=horizon_days)

    in_stock = set()
    expiring = set()
    for item in items:
        name = norm_name(item.name)
        in_stock.add(name)
        if any(b.expires_on is not None and b.expires_on <= cutoff for b in item.batches):
            expiring.add(name)
    return in_stock, expiring


def days_until(expires_on, now=None):
    """Whole days until expiry, rounded up (negative once expired)."""
    if now is None:
        now = datetime.now()
    return math.ceil((expires_on - now).total_seconds() / SECONDS_PER_DAY)


def expiration_status(expires_on, now=None, warning_days=7):
    """Classify a batch expiry as 'none', 'expired', 'expiring-soon' or 'ok'."""
    if expires_on is None:
        return 'none'
    days = days_until(expires_on, now)
    if days < 0:
        return 'expired'
    if days <= warning_days:
        return 'expiring-soon'
    return 'ok'


def format_expiration(expires_on, now=None, warning_days=7):
    """Short human label for a batch expiry."""
    if expires_on is None:
        return ''
    days = days_until(expires_on, now)
    if days < 0:
        return f"expired {abs(days)}d ago"
    if days == 0:
        return "expires today"
    if days == 1:
        return "expires tomorrow"
    if days <= warning_days:
        return f"expires in {days}d"
    return f"exp {expires_on.date().isoformat()}"


def describe_batch(batch, now=None, warning_days=7):
    """Batch dict for the inventory listing, with expiry status and label."""
    data = batch.to_dict()
    data['status'] = expiration_status(batch.expires_on, now, warning_days)
    data['label'] = format_expiration(batch.expires_on, now, warning_days)
    return data
