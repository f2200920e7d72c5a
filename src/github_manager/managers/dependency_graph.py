from collections.abc import Mapping
from datetime import datetime
from typing import Any

from github_manager.clients.github import JSON, GitHubManager, ReturnFormat
from github_manager.managers.shared.annotations import OWNER, REPO, RETURN_FORMAT
from github_manager.models.dependency_graph import (
    DependencyChange,
    DependencySubmission,
    Detector,
    Manifest,
    SubmissionJob,
    dump_submission_model,
)

SNAPSHOT_FORMAT_VERSION = 0


class DependencySubmissionManager(GitHubManager):
    """Submit dependencies to the dependency graph of a repository."""

    def create_repository_snapshot(
        self,
        owner: OWNER,
        repo: REPO,
        job: SubmissionJob,
        sha: str,
        ref: str,
        detector: Detector,
        scanned: datetime | str,
        manifests: Mapping[str, Manifest] | None = None,
        metadata: Mapping[str, Any] | None = None,
        version: int = SNAPSHOT_FORMAT_VERSION,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> DependencySubmission | JSON | str | None:
        """Create a snapshot of the dependencies of a repository at a commit.

        Args:
            owner: The account owner of the repository.
            repo: The name of the repository.
            job: The job that produced the snapshot.
            sha: The commit SHA the snapshot was taken at; 40 characters.
            ref: The repository branch that triggered the scan, i.e. 'refs/heads/main'.
            detector: The tool that detected the dependencies.
            scanned: When the snapshot was taken.
            manifests: The manifests in the snapshot, keyed by name.
            metadata: Extra information about the snapshot.
            version: The version of the snapshot format.
            return_format: The format to return the response in.
        """

        body: dict[str, Any] = {
            "version": version,
            "job": dump_submission_model(job),
            "sha": sha,
            "ref": ref,
            "detector": dump_submission_model(detector),
            "scanned": scanned.isoformat() if isinstance(scanned, datetime) else scanned,
            "manifests": {name: dump_submission_model(manifest) for name, manifest in manifests.items()} if manifests is not None else None,
            "metadata": dict(metadata) if metadata is not None else None,
        }

        return self._perform_rest_request(
            action="Create repository snapshot",
            response_model=DependencySubmission,
            method="POST",
            path=f"/repos/{owner}/{repo}/dependency-graph/snapshots",
            body=body,
            return_format=return_format,
        )


class DependencyReviewManager(GitHubManager):
    """Compare the dependencies of a repository between two commits."""

    def get_dependency_diff(
        self,
        owner: OWNER,
        repo: REPO,
        base: str,
        head: str,
        name: str | None = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[DependencyChange] | JSON | str | None:
        """Get the dependency changes between two commits.

        Args:
            owner: The account owner of the repository.
            repo: The name of the repository.
            base: The base revision, i.e. a branch name or commit SHA.
            head: The head revision.
            name: Only compare the manifest file with this path.
            return_format: The format to return the response in.
        """

        return self._perform_rest_request(
            action="Get dependency diff",
            response_model=list[DependencyChange],
            path=f"/repos/{owner}/{repo}/dependency-graph/compare/{base}...{head}",
            params={"name": name},
            return_format=return_format,
        )
