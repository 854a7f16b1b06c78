"""Run command implementation - the update pass."""

import logging

import click

from toolupdate.cli.ensure import Ensure
from toolupdate.cli.json_output import emit_json
from toolupdate.cli.json_schemas import RunCommandResponse, UpdateResultInfo
from toolupdate.cli.output import print_update_summary
from toolupdate.core.context import UpdaterContext
from toolupdate.core.errors import RegistryIOError
from toolupdate.core.orchestrator import UpdateSummary, run_updates
from toolupdate.core.platform_info import detect_platform
from toolupdate.core.prerequisites import find_missing_tools
from toolupdate.core.self_update import SelfUpdateResult, check_self_update
from toolupdate.core.user_feedback import SuppressedFeedback

logger = logging.getLogger(__name__)


@click.command("run")
@click.argument("projects", nargs=-1, metavar="[PROJECT]...")
@click.option(
    "-n",
    "--dry-run",
    is_flag=True,
    help="Show what would be updated without downloading or installing anything",
)
@click.option(
    "-s",
    "--skip-tests",
    is_flag=True,
    help="Pass --skip-tests to each project's install command",
)
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def run_cmd(
    ctx: UpdaterContext,
    projects: tuple[str, ...],
    dry_run: bool,
    skip_tests: bool,
    output_json: bool,
) -> None:
    """Check registered projects and install newer versions.

    With no PROJECT arguments every registered project is checked, in
    registry order. Names that are not registered are ignored.

    Exits with status 1 if any checked project failed to update.

    \b
    JSON Output (--json):
    Output schema is defined and validated by RunCommandResponse
    in toolupdate.cli.json_schemas.
    """
    run_ctx = ctx.with_run_options(
        dry_run=dry_run,
        skip_tests=skip_tests,
        feedback=SuppressedFeedback() if output_json else None,
    )
    feedback = run_ctx.feedback

    if dry_run:
        feedback.info(click.style("DRY RUN MODE - No changes will be made", fg="yellow", bold=True))
        feedback.info("")

    missing = find_missing_tools(run_ctx.shell)
    if missing:
        Ensure.fail(f"Missing required tools: {', '.join(missing)}")

    logger.debug("Platform: %s", detect_platform().describe())

    try:
        summary = run_updates(run_ctx, projects or None)
    except RegistryIOError as e:
        Ensure.fail(str(e))

    if not summary.results:
        if projects:
            feedback.info(f"No registered projects match: {', '.join(projects)}")
        else:
            feedback.info("No projects registered yet")
    elif not output_json:
        print_update_summary(summary, dry_run=dry_run)
        _report_totals(run_ctx, summary)

    self_update: SelfUpdateResult | None = None
    if summary.has_failures:
        logger.debug("Skipping self-update: %d project(s) failed", summary.failed_count)
    else:
        self_update = check_self_update(run_ctx)

    if output_json:
        response = RunCommandResponse(
            dry_run=dry_run,
            success=not summary.has_failures,
            updated=summary.updated_count,
            up_to_date=summary.up_to_date_count,
            failed=summary.failed_count,
            skipped=summary.skipped_count,
            results=[
                UpdateResultInfo(
                    name=result.name,
                    local_version=result.local_version,
                    remote_version=result.remote_version,
                    outcome=result.outcome.value,
                    message=result.message,
                )
                for result in summary.results
            ],
            self_update=self_update.outcome.value if self_update is not None else None,
        )
        emit_json(response.model_dump(mode="json"))

    if summary.has_failures:
        raise SystemExit(1)


def _report_totals(ctx: UpdaterContext, summary: UpdateSummary) -> None:
    if summary.has_failures:
        ctx.feedback.error(f"{summary.failed_count} project(s) failed to update")
    elif ctx.dry_run:
        ctx.feedback.info(f"{summary.skipped_count} project(s) would be updated")
    elif summary.updated_count > 0:
        ctx.feedback.success(f"Successfully updated {summary.updated_count} project(s)")
    else:
        ctx.feedback.success("All projects are up to date")
