import re

# Local part, "@", then a domain with at least one dot
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def validate_email(email: str) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.fullmatch(email) is not None


def validate_object_id(value) -> bool:
    return isinstance(value, str) and OBJECT_ID_PATTERN.fullmatch(value) is not None
