from .exceptions import InvariantViolation

def assert_required(entity, fields):
    missing = [
        field for field in fields
        if not str(getattr(entity, field, None) or "").strip()
    ]
    if missing:
        raise InvariantViolation(
            f"Missing required fields: {', '.join(missing)}"
        )

def assert_choice(entity, field, choices):
    value = getattr(entity, field, None)
    if value is not None and value not in choices:
        raise InvariantViolation(
            f"Invalid {field} '{value}'. Expected one of: {', '.join(choices)}"
        )

def assert_string_list(entity, field):
    value = getattr(entity, field, None)
    if value is None:
        return
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise InvariantViolation(f"{field} must be a list of strings")

FIELD_TYPE_NAMES = {
    str: "a string",
    bool: "true or false",
    int: "an integer",
    list: "a list",
}

def assert_field_types(payload, field_types):
    """
    Check raw request values before anything derives from them.
    None is accepted for every field; booleans are not integers.
    """
    for field, expected in field_types.items():
        value = payload.get(field)
        if value is None:
            continue
        if expected is int and isinstance(value, bool):
            valid = False
        else:
            valid = isinstance(value, expected)
        if not valid:
            raise InvariantViolation(f"{field} must be {FIELD_TYPE_NAMES[expected]}")
