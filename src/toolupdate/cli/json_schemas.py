"""Pydantic models for JSON output schemas.

These models define the JSON emitted by commands that accept --json and
validate it at runtime before it reaches stdout.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProjectInfo(BaseModel):
    """One registered project as shown by `toolupdate list --json`."""

    model_config = ConfigDict(strict=True)

    name: str
    repo_url: str
    branch: str
    install_dir: str
    version_file: str
    install_cmd: str | None
    installed_version: str


class ListCommandResponse(BaseModel):
    """JSON response schema for the `toolupdate list` command."""

    model_config = ConfigDict(strict=True)

    registry_path: str
    projects: list[ProjectInfo]


class UpdateResultInfo(BaseModel):
    """One project's outcome within a run."""

    model_config = ConfigDict(strict=True)

    name: str
    local_version: str
    remote_version: str | None
    outcome: str = Field(..., pattern="^(up-to-date|updated|failed|skipped)$")
    message: str | None


class RunCommandResponse(BaseModel):
    """JSON response schema for the `toolupdate run` command.

    Attributes:
        success: False iff at least one project failed
        self_update: Self-update outcome, or None when the check did not run
    """

    model_config = ConfigDict(strict=True)

    dry_run: bool
    success: bool
    updated: int = Field(..., ge=0)
    up_to_date: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    skipped: int = Field(..., ge=0)
    results: list[UpdateResultInfo]
    self_update: str | None
