"""Pure domain functions for building and searching the history snapshot.

Nothing here performs I/O.  The snapshot is a tuple of raw history lines,
most recent first; matching returns borrowed entries from it, deduplicated
by content and bounded to the number of rows the caller can display.
"""

from collections.abc import Sequence


def build_snapshot(raw_text: str) -> tuple[str, ...]:
    """Split raw history text into entries, most recent first.

    Lines keep their on-disk order until the final reversal.  A missing
    final newline does not drop the last line, and a trailing newline does
    not add an empty entry.  A ``\\r`` left over from CRLF files is removed.
    Duplicates are kept; deduplication belongs to ``match``.
    """
    lines = raw_text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    entries = [line.removesuffix("\r") for line in lines]
    entries.reverse()
    return tuple(entries)


def match(snapshot: Sequence[str], query: str | None, capacity: int) -> list[str]:
    """Return up to ``capacity`` distinct entries matching ``query``.

    Two passes over the snapshot, both in its stored (most-recent-first)
    order:

    1. Prefix pass: entries starting with ``query``.  With no query every
       entry qualifies.
    2. Substring pass, only when a query is active and room is left:
       entries containing ``query`` at an index other than 0.

    The first occurrence of an entry wins; later content-equal entries are
    skipped in both passes.  An empty query is treated like no query.
    Comparison is case-sensitive with no normalisation.
    """
    if capacity <= 0:
        return []
    if not query:
        query = None

    seen: set[str] = set()
    result: list[str] = []

    for entry in snapshot:
        if len(result) >= capacity:
            return result
        if entry in seen:
            continue
        if query is None or entry.startswith(query):
            result.append(entry)
            seen.add(entry)

    if query is None:
        return result

    for entry in snapshot:
        if len(result) >= capacity:
            break
        if entry in seen:
            continue
        if entry.find(query) > 0:
            result.append(entry)
            seen.add(entry)

    return result


def match_span(entry: str, query: str | None) -> tuple[int, int] | None:
    """Return the ``(start, end)`` span of the first ``query`` in ``entry``.

    Returns None when there is no active query or it does not occur.
    """
    if not query:
        return None
    start = entry.find(query)
    if start < 0:
        return None
    return start, start + len(query)
