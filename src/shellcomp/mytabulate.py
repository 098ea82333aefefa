from typing import List, Optional, Sequence


def mytabulate(rows: Sequence[Sequence[str]], header: Optional[Sequence[str]] = None) -> str:
    """Format rows of strings in left aligned columns"""
    data: List[List[str]] = [list(map(str, x)) for x in ([header] if header else []) + list(rows)]
    if not data:
        return ""
    cols: int = max(len(x) for x in data)
    lens: List[int] = [
        max(len(row[c]) if c < len(row) else 0 for row in data) for c in range(cols)
    ]
    # Last element does not need empty trailing spaces.
    lens[-1] = 0
    return "\n".join(
        " ".join(
            "%-*s" % (lens[c], row[c] if c < len(row) else "") for c in range(cols)
        ).rstrip()
        for row in data
    )
