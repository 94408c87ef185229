from urllib.parse import parse_qsl, urlencode

PREFIX = "f_"


def _stringify(value) -> str:
    """Render a value the way the browser does, so "true" survives a round trip."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else _stringify(v) for v in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_filters(filters: dict) -> str:
    """Flatten a (possibly nested) filter dict into f_-prefixed query parameters.

    Nested keys are joined with dots: {"price": {"min": 5}} -> "f_price.min=5".
    """
    entries: list[tuple[str, str]] = []

    def flatten(obj: dict, prefix: str = "") -> None:
        for key, value in obj.items():
            full_key = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                flatten(value, full_key)
            else:
                entries.append((f"{PREFIX}{full_key}", _stringify(value)))

    flatten(filters)
    return urlencode(entries)


def decode_filters(query_string: str) -> dict:
    """Inverse of encode_filters. Values come back as strings; other parameters are ignored."""
    filters: dict = {}
    for key, value in parse_qsl(query_string.lstrip("?"), keep_blank_values=True):
        if not key.startswith(PREFIX):
            continue
        *parents, leaf = key[len(PREFIX):].split(".")
        current = filters
        for part in parents:
            current = current.setdefault(part, {})
        current[leaf] = value
    return filters
