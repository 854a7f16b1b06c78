"""Self-update of the installed engine from a copy bundled in a managed project.

The engine's canonical installed copy (config engine_path) is replaced when the
project named by config engine_project ships a different file at
config bundled_engine. The new copy is staged beside the installed one,
verified, and swapped in with os.replace(), so the file being executed is never
rewritten in place; the next invocation picks up the new version.

Nothing here raises: every failure becomes a warning and a FAILED outcome.
"""

import filecmp
import logging
import os
import shutil
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from toolupdate.core.context import UpdaterContext

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class SelfUpdateOutcome(Enum):
    NOT_INSTALLED_LOCATION = "not-installed-location"
    NO_BUNDLED_COPY = "no-bundled-copy"
    UP_TO_DATE = "up-to-date"
    WOULD_UPDATE = "would-update"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass(frozen=True)
class SelfUpdateResult:
    outcome: SelfUpdateOutcome
    backup_path: Path | None = None
    message: str | None = None


def backup_path_for(installed: Path, now: datetime) -> Path:
    return installed.with_name(f"{installed.name}.backup.{now.strftime(BACKUP_TIMESTAMP_FORMAT)}")


def staged_path_for(installed: Path) -> Path:
    return installed.with_name(f".{installed.name}.staged")


def find_bundled_engine(ctx: UpdaterContext) -> Path | None:
    """Locate the engine copy inside the bundling project's install tree."""
    entry = ctx.registry.get(ctx.config.engine_project)
    if entry is None:
        logger.debug("%s is not registered, skipping self-update", ctx.config.engine_project)
        return None

    candidate = entry.resolved_install_dir() / ctx.config.bundled_engine
    if not candidate.is_file():
        logger.debug("No bundled engine at %s", candidate)
        return None
    return candidate


def check_self_update(ctx: UpdaterContext) -> SelfUpdateResult:
    """Replace the installed engine if the bundled copy differs byte-for-byte."""
    installed = ctx.config.engine_path
    if ctx.running_path.resolve() != installed.resolve() or not installed.is_file():
        logger.debug("Not running from installed location %s, skipping self-update", installed)
        return SelfUpdateResult(SelfUpdateOutcome.NOT_INSTALLED_LOCATION)

    bundled = find_bundled_engine(ctx)
    if bundled is None:
        return SelfUpdateResult(SelfUpdateOutcome.NO_BUNDLED_COPY)

    try:
        if filecmp.cmp(installed, bundled, shallow=False):
            logger.debug("Installed engine matches %s", bundled)
            return SelfUpdateResult(SelfUpdateOutcome.UP_TO_DATE)
    except OSError as e:
        return _failed(ctx, f"Could not compare {installed} with {bundled}: {e}")

    ctx.feedback.info(f"Newer version of toolupdate detected in {ctx.config.engine_project}")
    if ctx.dry_run:
        ctx.feedback.info(f"[DRY RUN] Would replace {installed} with {bundled}")
        return SelfUpdateResult(SelfUpdateOutcome.WOULD_UPDATE)

    ctx.feedback.info("Self-updating toolupdate...")
    staged = staged_path_for(installed)
    try:
        shutil.copy2(bundled, staged)
        if not filecmp.cmp(staged, bundled, shallow=False):
            staged.unlink(missing_ok=True)
            return _failed(ctx, f"Staged copy {staged} does not match {bundled}")
    except OSError as e:
        staged.unlink(missing_ok=True)
        return _failed(ctx, f"Could not stage {bundled}: {e}")

    backup: Path | None = backup_path_for(installed, ctx.time.now())
    try:
        shutil.copy2(installed, backup)
        logger.debug("Created backup: %s", backup)
    except OSError as e:
        ctx.feedback.warning(f"Failed to create backup (non-fatal): {e}")
        backup = None

    try:
        os.replace(staged, installed)
    except OSError as e:
        staged.unlink(missing_ok=True)
        return _failed(ctx, f"Could not replace {installed}: {e}")

    ctx.feedback.success("Successfully self-updated toolupdate")
    ctx.feedback.info(f"Restart recommended: {installed}")
    return SelfUpdateResult(SelfUpdateOutcome.UPDATED, backup_path=backup)


def _failed(ctx: UpdaterContext, message: str) -> SelfUpdateResult:
    ctx.feedback.warning(f"Self-update failed (continuing with current version): {message}")
    return SelfUpdateResult(SelfUpdateOutcome.FAILED, message=message)
