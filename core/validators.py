# core/validators.py
from core.sa.models.base import NAME_MAX_LENGTH

def clean_name(value: str) -> str:
    """Strip surrounding whitespace and check the name fits its column.

    Raises:
        ValueError: the name is blank or longer than NAME_MAX_LENGTH
    """
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    if len(value) > NAME_MAX_LENGTH:
        raise ValueError(f"must be at most {NAME_MAX_LENGTH} characters")
    return value
