def truncated_repr(value: object, max_length: int) -> str:
    text = repr(value)
    if len(text) <= max_length:
        return text
    return text[: max(max_length - 3, 0)] + "..."
