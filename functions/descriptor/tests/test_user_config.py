import json

import pytest

from functions.descriptor.models import WindowConfig
from functions.descriptor.services.user_config import (
    WINDOW_CONFIG_KEY,
    deserialize_user_config,
    extract_window_config,
    merge_window_config,
    serialize_user_config,
)


def test_serialize_round_trips_nested_values():
    user_config = {"a": 1, "nested": {"list": [1, "two", None], "flag": True}}

    assert deserialize_user_config(serialize_user_config(user_config)) == user_config


@pytest.mark.parametrize("value", [None, ""])
def test_deserialize_empty_is_empty_dict(value):
    assert deserialize_user_config(value) == {}


def test_deserialize_rejects_non_object():
    with pytest.raises(ValueError, match="JSON object"):
        deserialize_user_config("[1, 2]")


def test_merge_without_window_copies_user_config():
    user_config = {"a": 1}

    merged = merge_window_config(user_config, None, "com.x.F")

    assert merged == {"a": 1}
    assert merged is not user_config


def test_merge_stores_window_with_actual_class_name():
    window = WindowConfig(window_length_count=10)

    merged = merge_window_config({"a": 1}, window, "com.x.F")

    assert merged["a"] == 1
    assert merged[WINDOW_CONFIG_KEY] == {
        "windowLengthCount": 10,
        "actualWindowFunctionClassName": "com.x.F",
    }
    # The caller's window config is left untouched.
    assert window.actual_window_function_class_name is None


def test_extract_removes_reserved_key():
    raw = json.loads(
        serialize_user_config(
            merge_window_config({"a": 1}, WindowConfig(window_length_duration_ms=500), "com.x.F")
        )
    )

    remaining, window = extract_window_config(raw)

    assert remaining == {"a": 1}
    assert window.window_length_duration_ms == 500
    assert window.actual_window_function_class_name == "com.x.F"


def test_extract_without_window():
    remaining, window = extract_window_config({"a": 1})

    assert remaining == {"a": 1}
    assert window is None
