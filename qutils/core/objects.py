"""
Object inspection helpers.
"""

from typing import Any


def is_plain_object(value: Any) -> bool:
    """
    True only for plain dicts.

    Subclasses (OrderedDict, defaultdict, ...) and other mappings don't count.
    """
    return type(value) is dict
