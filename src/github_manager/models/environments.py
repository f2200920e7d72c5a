from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from github_manager.clients.models.github import GitHubModel


class DeploymentBranchPolicy(GitHubModel):
    """The branches that can deploy to an environment."""

    protected_branches: bool = Field(description="Whether only branches with branch protection rules can deploy.")
    custom_branch_policies: bool = Field(description="Whether only branches that match the custom policies can deploy.")


class ProtectionRule(GitHubModel):
    id: int = Field(description="The id of the protection rule.")
    node_id: str | None = None
    type: str = Field(description="The type of the rule, i.e. 'wait_timer', 'required_reviewers' or 'branch_policy'.")
    wait_timer: int | None = Field(default=None, description="The time to wait before a deployment can proceed, in minutes.")
    prevent_self_review: bool | None = Field(default=None, description="Whether deployment reviewers can approve their own runs.")
    reviewers: list[dict[str, Any]] | None = Field(default=None, description="The users or teams that can review deployments.")


class Environment(GitHubModel):
    """A deployment environment of a repository."""

    id: int = Field(description="The id of the environment.")
    node_id: str | None = None
    name: str = Field(description="The name of the environment.")
    url: str | None = None
    html_url: str | None = None
    created_at: datetime | None = Field(default=None, description="The date and time the environment was created.")
    updated_at: datetime | None = Field(default=None, description="The date and time the environment was updated.")
    protection_rules: list[ProtectionRule] = Field(default_factory=list, description="The protection rules of the environment.")
    deployment_branch_policy: DeploymentBranchPolicy | None = Field(
        default=None, description="The branches that can deploy to the environment; None means any branch can."
    )


class EnvironmentsList(GitHubModel):
    total_count: int = Field(description="The total number of environments.")
    environments: list[Environment] = Field(default_factory=list, description="The environments of this page.")


class EnvironmentReviewer(GitHubModel):
    """A user or team that must review deployments to an environment."""

    type: Literal["User", "Team"]
    id: int
