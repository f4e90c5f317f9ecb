"""
JSON parsing helpers.
"""

import json
from typing import Any, Dict, List, Union

JsonData = Union[str, int, float, bool, None, Dict[str, "JsonData"], List["JsonData"]]


def safe_json_parse(text: Union[str, bytes], default: Any = None) -> Any:
    """
    Parse a JSON string, returning a default value if parsing fails.

        safe_json_parse('[{"a": 1}]')  # [{"a": 1}]
        safe_json_parse("", [])        # []
        safe_json_parse("nope")        # None

    Oversized integer literals and very deep nesting also give the default.
    """
    try:
        return json.loads(text)
    except (ValueError, TypeError, RecursionError):
        return default
