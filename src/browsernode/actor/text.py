"""Whitespace normalisation for text read back from remote elements.

Two policies exist side by side. The default one preserves non-breaking spaces
through trimming and keeps line structure in visible text; the legacy one
collapses every whitespace run (non-breaking spaces included) into a single
space and trims, which is what older consumers of this package expect.
"""

import re

NBSP = '\u00a0'

# Zero-width space, left-to-right mark, right-to-left mark
_INVISIBLE_CHARS = re.compile('[\u200b\u200e\u200f]')
# Unicode whitespace minus the non-breaking space
_COLLAPSIBLE_RUN = re.compile(r'[^\S\u00a0]+')
# Same, minus line breaks as well
_HORIZONTAL_RUN = re.compile(r'[^\S\n\r\u00a0]+')
# CR, LF and CRLF all count as line breaks
_NEWLINE_RUN = re.compile(r'[\r\n]+')
_LEADING_SPACE = re.compile(r'\A[^\S\u00a0]+')
_TRAILING_SPACE = re.compile(r'[^\S\u00a0]+\Z')
_ANY_SPACE_RUN = re.compile(r'\s+')


def normalize_whitespace(text: str | None) -> str:
    """Collapse all whitespace runs to one space and trim (legacy policy)."""
    return _ANY_SPACE_RUN.sub(' ', text or '').strip()


def _trim(text: str) -> str:
    text = _LEADING_SPACE.sub('', text)
    return _TRAILING_SPACE.sub('', text)


def filter_text(text: str | None, legacy: bool = False) -> str:
    """Normalise full text content of a subtree.

    >>> filter_text('  a \\n\\t b\\u00a0 ')
    'a b '
    """
    if legacy:
        return normalize_whitespace(text)

    text = _INVISIBLE_CHARS.sub('', text or '')
    text = _COLLAPSIBLE_RUN.sub(' ', text)
    return _trim(text).replace(NBSP, ' ')


def filter_visible_text(text: str | None, legacy: bool = False) -> str:
    """Normalise rendered text, keeping single line breaks.

    >>> filter_visible_text('  a\\n\\nb  ')
    'a\\nb'
    """
    if legacy:
        return normalize_whitespace(text)

    text = _INVISIBLE_CHARS.sub('', text or '')
    text = _trim(text)
    text = _NEWLINE_RUN.sub('\n', text)
    text = _HORIZONTAL_RUN.sub(' ', text)
    return text.replace(NBSP, ' ')
