from typing import Optional

# camelCase query values -> filter field names
_SORT_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


def sort_field(value: Optional[str], default: str) -> str:
    if value is None:
        return default
    return _SORT_FIELDS.get(value, value)
