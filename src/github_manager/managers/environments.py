from collections.abc import Sequence

from github_manager.clients.github import JSON, GitHubManager, ReturnFormat, path_segment
from github_manager.managers.shared.annotations import ENVIRONMENT_NAME, ERROR_ON_NOT_FOUND, OWNER, PAGE, PER_PAGE, REPO, RETURN_FORMAT
from github_manager.models.environments import DeploymentBranchPolicy, Environment, EnvironmentReviewer, EnvironmentsList


class EnvironmentsManager(GitHubManager):
    """Deployment environments of a repository."""

    def list_environments(
        self,
        owner: OWNER,
        repo: REPO,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> EnvironmentsList | JSON | str | None:
        return self._perform_rest_request(
            action="List environments",
            response_model=EnvironmentsList,
            path=f"/repos/{owner}/{repo}/environments",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def get_environment(
        self,
        owner: OWNER,
        repo: REPO,
        environment_name: ENVIRONMENT_NAME,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> Environment | JSON | str | None:
        return self._perform_rest_request(
            action="Get environment",
            response_model=Environment,
            path=f"/repos/{owner}/{repo}/environments/{path_segment(environment_name)}",
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )

    def create_or_update_environment(
        self,
        owner: OWNER,
        repo: REPO,
        environment_name: ENVIRONMENT_NAME,
        wait_timer: int | None = None,
        prevent_self_review: bool | None = None,
        reviewers: Sequence[EnvironmentReviewer] | None = None,
        deployment_branch_policy: DeploymentBranchPolicy | None = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> Environment | JSON | str | None:
        """Create an environment, or update the protection rules of an existing one.

        Args:
            owner: The account owner of the repository.
            repo: The name of the repository.
            environment_name: The name of the environment.
            wait_timer: The time to wait before allowing deployments to proceed, in minutes (0 to 43200).
            prevent_self_review: Whether the user who started a deployment can approve it.
            reviewers: Up to six users or teams that may review jobs referencing the environment.
            deployment_branch_policy: The branches that can deploy to the environment.
            return_format: The format to return the response in.
        """

        body: dict[str, object] = {
            "wait_timer": wait_timer,
            "prevent_self_review": prevent_self_review,
            "reviewers": [reviewer.model_dump(include={"type", "id"}) for reviewer in reviewers] if reviewers is not None else None,
            "deployment_branch_policy": (
                deployment_branch_policy.model_dump(include={"protected_branches", "custom_branch_policies"})
                if deployment_branch_policy is not None
                else None
            ),
        }

        return self._perform_rest_request(
            action="Create or update environment",
            response_model=Environment,
            method="PUT",
            path=f"/repos/{owner}/{repo}/environments/{path_segment(environment_name)}",
            body=body,
            return_format=return_format,
        )

    def delete_environment(self, owner: OWNER, repo: REPO, environment_name: ENVIRONMENT_NAME) -> bool:
        return self._perform_status_request(
            action="Delete environment",
            method="DELETE",
            path=f"/repos/{owner}/{repo}/environments/{path_segment(environment_name)}",
        )
