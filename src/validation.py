"""Input validation for lifespan fact sets."""


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_facts(n: int, fact_form1, fact_form2) -> list[str]:
    """
    Validate a fact set before it is turned into a constraint graph:
    - The person count is a non-negative integer
    - Every fact is a pair of integers
    - Every person index lies in [1, n]

    Returns a list of problem messages (empty when the input is well formed).
    """
    problems: list[str] = []

    if not _is_index(n) or n < 0:
        problems.append(f"Invalid: person count must be a non-negative integer, got {n!r}")
        # Index checks are meaningless without a valid count
        return problems

    for form, facts in (("died-before", fact_form1), ("overlap", fact_form2)):
        for position, fact in enumerate(facts):
            try:
                a, b = fact
            except (TypeError, ValueError):
                problems.append(f"Invalid: {form} fact #{position + 1} is not a pair: {fact!r}")
                continue

            for person in (a, b):
                if not _is_index(person):
                    problems.append(
                        f"Invalid: {form} fact #{position + 1} has a non-integer person {person!r}"
                    )
                elif not 1 <= person <= n:
                    problems.append(
                        f"Invalid: {form} fact #{position + 1} refers to person {person}, "
                        f"outside 1..{n}"
                    )

    return problems
