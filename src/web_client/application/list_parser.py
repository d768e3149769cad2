"""Comma-delimited header value parsing."""


def parse_list(raw: str | None) -> list[str]:
    """Split a comma-delimited header value into trimmed tokens.

    Order and duplicates are preserved, and so are empty tokens produced by
    adjacent delimiters (``"a,,b"`` gives ``["a", "", "b"]``). An absent or
    empty value gives an empty list.
    """
    if not raw:
        return []
    return [token.strip() for token in raw.split(",")]
