"""Small string helpers."""

__all__ = ["prepend"]


def prepend(input: str, text: str) -> str:
    """Return *input* with *text* put in front of every line.

    A trailing newline starts a new (empty) line, which gets *text* too.
    """
    return "\n".join(text + line for line in input.split("\n"))