"""
UUID Utilities - Helper for UUID path parameters.
"""

from uuid import UUID

from fastapi import HTTPException


def validate_uuid(id_str: str, entity_name: str = "ID") -> UUID:
    """
    Validate and convert a string to UUID, raising HTTPException for routes.

    Args:
        id_str: String to convert to UUID
        entity_name: Entity name for error message (e.g., "Record ID")

    Returns:
        UUID object

    Raises:
        HTTPException: 400 if the string is not a valid UUID

    Example:
        >>> validate_uuid("invalid", entity_name="Record ID")
        HTTPException(status_code=400, detail="Invalid Record ID")
    """
    try:
        return UUID(id_str)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {entity_name}")
