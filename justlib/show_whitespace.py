"""Render spaces and tabs as visible symbols."""

_VISIBLE = str.maketrans({"\t": "␉", " ": "␠"})


def show_whitespace(text: str) -> str:
    """Return text with tabs shown as ␉ and spaces as ␠."""
    return text.translate(_VISIBLE)