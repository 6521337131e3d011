"""Console formatting of check results."""

from collections.abc import Iterable, Sequence


def get_dots(names: Sequence[str]) -> list[str]:
    """Dot separators that pad every name to the longest name plus three."""
    if not names:
        return []
    width = max(len(name) for name in names)
    return ["." * (width - len(name) + 3) for name in names]


def format_check_lines(names: Sequence[str], fails: Iterable[bool]) -> list[str]:
    """One ``<name><dots>passed|failed`` line per check."""
    return [
        f"{name}{dots}{'failed' if failed else 'passed'}"
        for name, dots, failed in zip(names, get_dots(names), fails)
    ]
