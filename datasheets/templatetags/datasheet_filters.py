"""Template filters for data sheet markup."""
import re

from django import template
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

register = template.Library()

# A run of letters/digits, an underscore, another run: 'V_CC', 'CO_2'
SUBSCRIPT_PATTERN = re.compile(r'([^\W_]+)_([^\W_]+)')


def to_subscript(text) -> str:
    """
    Escape text and turn ``word_token`` into ``word<sub>token</sub>``.

    Args:
        text: Plain text

    Returns:
        Safe HTML string
    """
    if text is None:
        return mark_safe('')
    escaped = str(conditional_escape(text))
    return mark_safe(SUBSCRIPT_PATTERN.sub(r'\1<sub>\2</sub>', escaped))


@register.filter
def subscript(text):
    """Escape text and render ``word_token`` as a subscript."""
    return to_subscript(text)
