"""Check result container."""

import logging
from dataclasses import dataclass, field

from .formatting import format_check_lines

logger = logging.getLogger(__name__)


@dataclass
class CheckReport:
    """Ordered results of one run of checks over a chunk.

    Each entry is ``(check name, failed)``; a name requested twice appears
    twice.
    """

    results: list[tuple[str, bool]] = field(default_factory=list)

    def add_result(self, name: str, failed: bool) -> None:
        """Record the outcome of one check."""
        self.results.append((name, bool(failed)))
        logger.debug(f"Check {name}: {'failed' if failed else 'passed'}")

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.results]

    @property
    def fails(self) -> list[bool]:
        return [failed for _, failed in self.results]

    @property
    def failed(self) -> bool:
        """Return True if any check failed."""
        return any(self.fails)

    @property
    def failed_checks(self) -> list[str]:
        return [name for name, failed in self.results if failed]

    @property
    def passed_checks(self) -> list[str]:
        return [name for name, failed in self.results if not failed]

    def as_dict(self) -> dict[str, bool]:
        """Map check name to failed flag."""
        return dict(self.results)

    def summary(self) -> dict[str, int | bool]:
        """Get result summary."""
        return {
            "failed": self.failed,
            "checks_run": len(self.results),
            "checks_failed": len(self.failed_checks),
            "checks_passed": len(self.passed_checks),
        }

    def report(self) -> str:
        """Per-check diagnostic lines, joined by newlines."""
        return "\n".join(format_check_lines(self.names, self.fails))
