from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from github_manager.clients.models.github import GitHubModel

# Dependency submission


class SubmissionJob(GitHubModel):
    """The job that produced a dependency snapshot."""

    id: str = Field(description="The external id of the job.")
    correlator: str = Field(description="Groups snapshots from the same tool and job, i.e. the workflow and job name.")
    html_url: str | None = Field(default=None, description="The URL for the job.")


class Detector(GitHubModel):
    """The tool that detected the dependencies."""

    name: str = Field(description="The name of the detector.")
    version: str = Field(description="The version of the detector.")
    url: str = Field(description="The URL of the detector.")


class ResolvedDependency(GitHubModel):
    package_url: str | None = Field(default=None, description="The package URL of the dependency, see https://github.com/package-url/purl-spec.")
    metadata: dict[str, str | int | float | bool | None] | None = None
    relationship: Literal["direct", "indirect"] | None = Field(default=None, description="Whether the dependency is used directly.")
    scope: Literal["runtime", "development"] | None = Field(default=None, description="Whether the dependency is needed at runtime.")
    dependencies: list[str] | None = Field(default=None, description="The package URLs of the dependencies of this dependency.")


class ManifestFile(GitHubModel):
    source_location: str | None = Field(default=None, description="The path of the manifest file relative to the repository root.")


class Manifest(GitHubModel):
    name: str = Field(description="The name of the manifest.")
    file: ManifestFile | None = None
    metadata: dict[str, str | int | float | bool | None] | None = None
    resolved: dict[str, ResolvedDependency] | None = Field(default=None, description="The dependencies resolved from the manifest.")


class DependencySubmission(GitHubModel):
    """The result of submitting a dependency snapshot."""

    id: int = Field(description="The id of the snapshot.")
    created_at: datetime = Field(description="The date and time the snapshot was created.")
    result: str = Field(description="The result of the submission, i.e. 'SUCCESS', 'ACCEPTED' or 'INVALID'.")
    message: str = Field(description="A message describing the result.")


# Dependency review


class Vulnerability(GitHubModel):
    severity: str
    advisory_ghsa_id: str
    advisory_summary: str
    advisory_url: str


class DependencyChange(GitHubModel):
    """A dependency added or removed between two commits."""

    change_type: Literal["added", "removed"]
    manifest: str
    ecosystem: str
    name: str
    version: str
    package_url: str | None = None
    license: str | None = None
    source_repository_url: str | None = None
    vulnerabilities: list[Vulnerability] = Field(default_factory=list)
    scope: str | None = None

    @property
    def is_vulnerable(self) -> bool:
        return bool(self.vulnerabilities)


def dump_submission_model(model: GitHubModel) -> dict[str, Any]:
    return model.model_dump(exclude_none=True, by_alias=True)
