DEFAULT_MAX_LENGTH = 2000  # Discord message content limit
DEFAULT_MARKER = "..."

def truncate(text: str, max_length: int = DEFAULT_MAX_LENGTH, marker: str = DEFAULT_MARKER) -> str:
    """Cap text at max_length characters, ending with marker when shortened.

    Applying it twice with the same bound gives the same result as once.
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")
    if max_length < len(marker):
        raise ValueError(f"max_length {max_length} is shorter than marker {marker!r}")

    if len(text) <= max_length:
        return text
    return text[: max_length - len(marker)] + marker
