"""Plain-text scan report."""
from typing import Iterable, List

from .models import ScanOutcome


def format_outcome(outcome: ScanOutcome, show_banner: bool) -> str:
    """Render one open port as "<port>/tcp open [<service> <banner>]"."""
    if show_banner and outcome.banner:
        return f"{outcome.port}/tcp open {outcome.service} {outcome.banner}"
    return f"{outcome.port}/tcp open"


def format_report(outcomes: Iterable[ScanOutcome], show_banner: bool) -> List[str]:
    return [format_outcome(o, show_banner) for o in outcomes if o.open]


def print_report(outcomes: Iterable[ScanOutcome], show_banner: bool) -> None:
    for line in format_report(outcomes, show_banner):
        print(line)
