"""Extraction of a UI tree from raw model output."""

import json
import re

from pydantic import ValidationError

from ..components import UIComponentNode
from .base import UIResponseParseError

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?```\s*$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence if present."""
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    return match.group(1).strip() if match else stripped


def parse_ui_response(text: str) -> UIComponentNode:
    """Parse model output into a UIComponentNode.

    Tolerates markdown code fences and prose around the outermost JSON
    object.

    Raises:
        UIResponseParseError: If no valid UI tree can be extracted
    """
    body = strip_code_fences(text)
    start = body.find("{")
    end = body.rfind("}")
    if start == -1 or end < start:
        raise UIResponseParseError("Model response contains no JSON object", raw=text)

    try:
        data = json.loads(body[start:end + 1])
    except json.JSONDecodeError as e:
        raise UIResponseParseError(f"Model response is not valid JSON: {e}", raw=text) from e

    try:
        return UIComponentNode.model_validate(data)
    except ValidationError as e:
        raise UIResponseParseError(f"Model response is not a UI tree: {e}", raw=text) from e
