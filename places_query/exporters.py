# places_query/exporters.py
import os
from typing import Any, Dict, List

import pandas as pd

# Response keys that hold the row list, per endpoint family
ROW_KEYS = ("results", "candidates", "predictions")


def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def response_rows(response: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Rows of a parsed Places response: search results, find-place candidates,
    autocomplete predictions, or the single details `result`.
    """
    for key in ROW_KEYS:
        if key in response:
            return list(response.get(key) or [])
    result = response.get("result")
    return [result] if result else []


def response_to_frame(response: Dict[str, Any]) -> pd.DataFrame:
    # nested objects (geometry.location.lat, ...) become dotted columns
    return pd.json_normalize(response_rows(response))


def export_response_csv(response: Dict[str, Any], out_path: str) -> int:
    ensure_dir(os.path.dirname(out_path))
    df = response_to_frame(response)
    df.to_csv(out_path, index=False)
    return len(df)


def export_photo(content: bytes, out_path: str) -> None:
    ensure_dir(os.path.dirname(out_path))
    with open(out_path, "wb") as fh:
        fh.write(content)
