"""
User config serialization.

The descriptor stores the user config bag as a JSON string. Window parameters
have no field of their own in the descriptor, so they ride inside the bag under
WINDOW_CONFIG_KEY; merge_window_config and extract_window_config are the only
places that know about it.
"""

import json
from typing import Any, Dict, Optional, Tuple

from ..models import WindowConfig

WINDOW_CONFIG_KEY = "__WINDOWCONFIGS__"


def serialize_user_config(user_config: Dict[str, Any]) -> str:
    return json.dumps(user_config, ensure_ascii=False)


def deserialize_user_config(value: Optional[str]) -> Dict[str, Any]:
    if not value:
        return {}
    data = json.loads(value)
    if not isinstance(data, dict):
        raise ValueError(f"User config must be a JSON object, got: {type(data).__name__}")
    return data


def merge_window_config(
    user_config: Optional[Dict[str, Any]],
    window_config: Optional[WindowConfig],
    class_name: Optional[str],
) -> Dict[str, Any]:
    """
    Return a copy of the user config with the window parameters merged in.

    The stored window block records `class_name` as the actual window function
    so that it can be restored on the way back.
    """
    merged = dict(user_config or {})
    if window_config is not None:
        window = window_config.model_copy(
            update={"actual_window_function_class_name": class_name}
        )
        merged[WINDOW_CONFIG_KEY] = window.model_dump(by_alias=True, exclude_none=True)
    return merged


def extract_window_config(
    user_config: Dict[str, Any],
) -> Tuple[Dict[str, Any], Optional[WindowConfig]]:
    """Split the reserved window block off a deserialized user config."""
    remaining = dict(user_config)
    raw = remaining.pop(WINDOW_CONFIG_KEY, None)
    if raw is None:
        return remaining, None
    return remaining, WindowConfig.model_validate(raw)
