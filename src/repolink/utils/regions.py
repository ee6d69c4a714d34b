"""Editor region to line range conversion."""

from repolink.core.exceptions import InvalidRegionError
from repolink.core.models.link import LineRange


def line_number_at(text: str, offset: int) -> int:
    """Return the 1-based line number containing character ``offset``."""
    return text.count("\n", 0, offset) + 1


def line_range_from_region(text: str, start: int, end: int) -> LineRange:
    """Convert a marked region of ``text`` into the lines it covers.

    ``start`` and ``end`` are 0-based character offsets with ``end``
    exclusive. The end line is the line holding the last included
    character, so a region that stops right after a newline does not
    reach into the following line. An empty region covers the line
    holding ``start``.
    """
    if not 0 <= start <= end <= len(text):
        raise InvalidRegionError(
            f"Region {start}:{end} is outside text of length {len(text)}",
            details={"start": start, "end": end, "length": len(text)},
        )

    first = line_number_at(text, start)
    last = line_number_at(text, end - 1) if end > start else first
    return LineRange(start=first, end=last)
