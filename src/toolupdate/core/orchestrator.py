"""Registry-wide update pass."""

import logging
from collections.abc import Collection
from dataclasses import dataclass

from toolupdate.core.context import UpdaterContext
from toolupdate.core.updater import UpdateOutcome, UpdateResult, update_one

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateSummary:
    """Results of one pass, in registry order."""

    results: tuple[UpdateResult, ...]

    def count(self, outcome: UpdateOutcome) -> int:
        return sum(1 for result in self.results if result.outcome == outcome)

    @property
    def updated_count(self) -> int:
        return self.count(UpdateOutcome.UPDATED)

    @property
    def failed_count(self) -> int:
        return self.count(UpdateOutcome.FAILED)

    @property
    def up_to_date_count(self) -> int:
        return self.count(UpdateOutcome.UP_TO_DATE)

    @property
    def skipped_count(self) -> int:
        return self.count(UpdateOutcome.SKIPPED)

    @property
    def has_failures(self) -> bool:
        """True iff at least one processed entry failed."""
        return self.failed_count > 0


def run_updates(ctx: UpdaterContext, selection: Collection[str] | None = None) -> UpdateSummary:
    """Apply update_one() to every selected registry entry, in registry order.

    Args:
        ctx: Application context
        selection: Names to update, or None for every registered entry.
            Names that are not registered are ignored.

    Returns:
        UpdateSummary with one result per processed entry

    Raises:
        RegistryIOError: If the registry cannot be read
    """
    entries = ctx.registry.read_all()
    selected = frozenset(selection) if selection is not None else None

    if selected is not None:
        registered = {entry.name for entry in entries}
        for name in sorted(selected - registered):
            logger.debug("Selected project is not registered: %s", name)

    results: list[UpdateResult] = []
    for entry in entries:
        if selected is not None and entry.name not in selected:
            continue
        results.append(update_one(ctx, entry))
        ctx.feedback.info("")

    summary = UpdateSummary(results=tuple(results))
    logger.debug(
        "Pass complete: updated=%d failed=%d up_to_date=%d skipped=%d",
        summary.updated_count,
        summary.failed_count,
        summary.up_to_date_count,
        summary.skipped_count,
    )
    return summary
