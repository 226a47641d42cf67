"""Facts file parsing.

A facts file holds one directive per line:

    people 6
    before 1 2      # person 1 died before person 2 was born
    overlap 2 3     # the lives of persons 2 and 3 overlapped

Blank lines and '#' comments are ignored; keywords are case-insensitive.
"""

from pathlib import Path
import re

from models import FactSet

# Keyword -> number of integer arguments
DIRECTIVES = {
    "PEOPLE": 1,
    "BEFORE": 2,
    "OVERLAP": 2,
}

_LINE_RE = re.compile(r"^([A-Za-z]+)((?:\s+\S+)*)$")


def parse_fact_line(line: str) -> tuple[str, tuple[int, ...]] | None:
    """
    Parse one line of a facts file into (KEYWORD, arguments).
    Returns None for blank and comment-only lines.
    """
    s = line.split("#", 1)[0].strip()
    if not s:
        return None

    match = _LINE_RE.match(s)
    if not match:
        raise ValueError(f"Unrecognized directive: {s!r}")

    keyword = match.group(1).upper()
    if keyword not in DIRECTIVES:
        raise ValueError(f"Unknown keyword {match.group(1)!r}")

    raw_args = match.group(2).split()
    if len(raw_args) != DIRECTIVES[keyword]:
        raise ValueError(
            f"{keyword.lower()} takes {DIRECTIVES[keyword]} argument(s), got {len(raw_args)}"
        )

    try:
        args = tuple(int(a) for a in raw_args)
    except ValueError:
        raise ValueError(f"Non-integer argument in {s!r}") from None

    return keyword, args


def parse_facts(text: str) -> FactSet:
    """
    Parse the contents of a facts file.

    If no 'people' line is given, the person count is the largest index mentioned.
    Raises ValueError naming the offending line number.
    """
    n: int | None = None
    died_before: list[tuple[int, int]] = []
    overlapped: list[tuple[int, int]] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        try:
            parsed = parse_fact_line(line)
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None

        if parsed is None:
            continue

        keyword, args = parsed
        if keyword == "PEOPLE":
            if n is not None:
                raise ValueError(f"line {lineno}: 'people' given more than once")
            n = args[0]
        elif keyword == "BEFORE":
            died_before.append((args[0], args[1]))
        else:
            overlapped.append((args[0], args[1]))

    if n is None:
        n = max((p for fact in died_before + overlapped for p in fact), default=0)

    return FactSet(n=n, died_before=died_before, overlapped=overlapped)


def parse_facts_file(filepath: Path) -> FactSet:
    """Read and parse a facts file."""
    return parse_facts(Path(filepath).read_text())
