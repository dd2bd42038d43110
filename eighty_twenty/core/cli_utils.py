from typing import Callable, Iterable, Optional, Sequence


def print_question(message: str) -> None:
    """
    Prompt for the user (CLI only).
    A plain print, since this is direct interaction rather than logging.
    """
    print(f"?  {message}", end="")


def ask(
    question: str,
    default: str,
    input_fn: Callable[[str], str] = input,
    max_attempts: int = 3,
) -> str:
    """
    Ask a free-text question with a default answer.

    An empty answer selects the default. Answers made only of whitespace
    are rejected and the question is asked again.
    """
    for _ in range(max_attempts):
        print_question(f"{question} [{default}] ")
        raw = input_fn("")
        if raw == "":
            return default
        answer = raw.strip()
        if answer:
            return answer
        print("   Please enter a non-empty value.")
    return default


def print_table(
    title: str,
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
    out: Optional[Callable[[str], None]] = None,
) -> None:
    """
    Print a small fixed-width table to the terminal.
    """
    out = out or print
    rows = [list(map(str, r)) for r in rows]
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def _line(cells: Sequence[str]) -> str:
        return " | ".join(c.ljust(widths[i]) for i, c in enumerate(cells))

    out(title)
    out(_line(headers))
    out("-+-".join("-" * w for w in widths))
    for row in rows:
        out(_line(row))
