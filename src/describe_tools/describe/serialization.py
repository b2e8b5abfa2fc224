"""JSON codec for describe documents."""

import json
from typing import Any, Optional

from describe_tools.core.exceptions import DescribeParseError, ValidationError

DescribeDocument = dict[str, Any]

DESCRIBE_FILE_SUFFIX = ".desc.json"


def parse_describe(text: str, path: Optional[str] = None) -> DescribeDocument:
    """Parse describe JSON text.

    The document is not validated beyond being well-formed JSON.

    Raises:
        DescribeParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        location = f" in '{path}'" if path else ""
        raise DescribeParseError(f"Invalid describe JSON{location}: {e}", path) from e


def serialize_describe(describe: DescribeDocument) -> str:
    """Serialize a describe document to compact JSON text.

    Raises:
        ValidationError: If the document holds values JSON cannot represent
    """
    try:
        return json.dumps(describe, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Describe document is not JSON serializable: {e}") from e
