def validate_non_negative_integer(type_: object, value: int | None) -> None:
    """Validate that a column or row index is not negative."""
    if value is not None and value < 0:
        raise ValueError("Value must be a non-negative integer")


def validate_wave_name(type_: object, name: str) -> None:
    if "'" in name:
        raise ValueError("Wave name must not contain single quotes")
