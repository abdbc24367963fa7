"""
Name Normalization Service

Every place that compares ingredient, item, tag, cuisine or technique
names goes through norm_name() so "Canned_Chickpeas" matches
"canned chickpeas".
"""

import re

_SEPARATORS = re.compile(r'[_-]+')
_WHITESPACE = re.compile(r'\s+')


def norm_name(value):
    """Trim, lowercase, and collapse separators and whitespace to single spaces."""
    normalized = value.strip().lower()
    normalized = _SEPARATORS.sub(' ', normalized)
    normalized = _WHITESPACE.sub(' ', normalized)
    # A trailing "_" or "-" becomes a space, so strip again to stay idempotent
    return normalized.strip()


def uniq(values):
    """De-duplicate while keeping first-seen order."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result
