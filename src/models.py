"""Data classes for lifespan facts and proposed dates."""

from dataclasses import dataclass, field

BIRTH = "BIRTH"
DEATH = "DEATH"


@dataclass(frozen=True)
class Event:
    kind: str  # BIRTH or DEATH
    person: int  # 1-based person index


@dataclass
class FactSet:
    n: int
    died_before: list[tuple[int, int]] = field(default_factory=list)  # (a, b): a died before b born
    overlapped: list[tuple[int, int]] = field(default_factory=list)  # (a, b): lives overlapped


@dataclass
class ProposedDates:
    birth: list[int]  # birth[i - 1] is the date of person i's birth
    death: list[int]  # death[i - 1] is the date of person i's death
