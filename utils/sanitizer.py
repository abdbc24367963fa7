"""
Input Sanitization Module

Cleans user-supplied text before it is stored: strips control characters,
trims whitespace and enforces length limits. Output is plain text; the
JSON API leaves escaping to whoever renders it.
"""

import re

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')
# Same as above but keeps tab and newline for multi-line fields
_CONTROL_CHARS_MULTILINE = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=200):
    """
    Clean a single-line value such as a name, tag or quantity.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 200)

    Returns:
        Cleaned string (empty string for None)
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Collapse runs of whitespace (tabs and newlines included), then drop
    # remaining control characters and null bytes
    text = re.sub(r'\s+', ' ', text)
    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_multiline(text, max_length=50000):
    """
    Clean a multi-line value such as instructions or notes.

    Preserves newlines and tabs for formatting.
    """
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = text.replace('\r\n', '\n')
    text = _CONTROL_CHARS_MULTILINE.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text
