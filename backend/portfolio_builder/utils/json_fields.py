import json
from typing import Any, List


def safe_get_array(value: Any) -> List[Any]:
    """
    Coerce a stored structured field into a list.

    Lists pass through, JSON-encoded lists are decoded, anything else
    (None, objects, garbage strings) becomes an empty list.
    """
    if not value:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            return []
        return parsed if isinstance(parsed, list) else []
    return []
