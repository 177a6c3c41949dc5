from typing import Any, Type, Union
import json
import logging

from pydantic import BaseModel

from .exceptions import ParseError

logger = logging.getLogger(__name__)

def _encode_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    # Plain objects are encoded by their own fields
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

def serialize(value: Any) -> str:
    """
    Return the compact JSON representation of a value.

    Args:
        value: Any JSON-compatible value, pydantic model or plain object

    Returns:
        JSON string without extra whitespace, e.g. '[1,2,3]'

    Raises:
        ParseError: If the value cannot be encoded, including NaN and infinity
    """
    try:
        return json.dumps(value, separators=(",", ":"), default=_encode_default, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Cannot serialize value: {str(e)}") from e

def deserialize(prototype: Union[Type[Any], Any], text: str) -> Any:
    """
    Build an instance of the prototype's type from a JSON object.

    The object's values are passed to the constructor positionally, in the
    order they appear in the text.

    Args:
        prototype: Target class, or an instance whose type is used
        text: JSON object string

    Returns:
        New instance of the target type

    Raises:
        ParseError: If the text is not a JSON object or the constructor
            rejects the values
    """
    target = prototype if isinstance(prototype, type) else type(prototype)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON string: {str(e)}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return target(*data.values())
    except Exception as e:
        logger.debug(f"Constructor of {target.__name__} rejected {data!r}: {str(e)}")
        raise ParseError(f"Cannot build {target.__name__} from JSON: {str(e)}") from e
