from typing import Any, Dict, List, Optional

AUTHOR_KEYS = ("@id", "name", "url")
INSTRUCTION_KEYS = ("text", "name", "image", "url")


class FieldShapeError(ValueError):
    pass


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _leading_strings(items: List[Any]) -> List[str]:
    # Keep strings up to the first element of another kind.
    out: List[str] = []
    for item in items:
        if not isinstance(item, str):
            break
        out.append(item)
    return out


def decode_list_or_scalar(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return _leading_strings(value)
    raise FieldShapeError(f"expected a string or an array of strings, got {_kind(value)}")


def decode_image(value: Any) -> List[str]:
    """image: string, array of strings, or an object referenced by @id.

    Never fails; shapes it does not understand decode to an empty list.
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return _leading_strings(value)
    if isinstance(value, dict):
        ref = value.get("@id")
        return [ref] if isinstance(ref, str) else []
    return []


def _author_fields(entries: Dict[str, Any]) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for key, value in entries.items():
        if key in AUTHOR_KEYS and isinstance(value, str):
            fields[key] = value
    return fields


def decode_author(value: Any) -> Dict[str, str]:
    """author: an object, or an array whose first element is a string map.

    Returns the Author fields that were found; anything unexpected yields an
    empty mapping instead of an error.
    """
    if isinstance(value, dict):
        return _author_fields(value)
    if isinstance(value, list):
        if not value:
            return {}
        first = value[0]
        if isinstance(first, dict) and all(isinstance(v, str) for v in first.values()):
            return _author_fields(first)
        return {}
    return {}


def decode_instruction(value: Any) -> Dict[str, str]:
    if isinstance(value, str):
        return {"text": value}
    if isinstance(value, dict):
        step = {"text": ""}
        for key, entry in value.items():
            if key not in INSTRUCTION_KEYS:
                continue
            if not isinstance(entry, str):
                raise FieldShapeError(f"instruction {key!r} must be a string, got {_kind(entry)}")
            step[key] = entry
        return step
    raise FieldShapeError(f"instruction must be a string or an object, got {_kind(value)}")


def decode_instructions(value: Any) -> List[Dict[str, str]]:
    """recipeInstructions: always an array of strings and/or HowToStep objects."""
    if not isinstance(value, list):
        raise FieldShapeError(f"recipeInstructions must be an array, got {_kind(value)}")
    return [decode_instruction(item) for item in value]
