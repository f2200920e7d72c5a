from datetime import datetime

from pydantic import Field

from github_manager.clients.models.github import GitHubModel, Repository


class PublicKey(GitHubModel):
    """The public key secrets must be encrypted with before they are created or updated."""

    key_id: str = Field(description="The identifier of the key.")
    key: str = Field(description="The base64 encoded public key.")


class Secret(GitHubModel):
    """A repository or environment secret. The value itself is never returned."""

    name: str = Field(description="The name of the secret.")
    created_at: datetime = Field(description="The date and time the secret was created.")
    updated_at: datetime = Field(description="The date and time the secret was updated.")


class OrganizationSecret(Secret):
    """An organization secret."""

    visibility: str = Field(description="Which repositories of the organization can access the secret.")
    selected_repositories_url: str | None = Field(
        default=None, description="The API URL listing the repositories that can access the secret, if the visibility is 'selected'."
    )


class SecretsList(GitHubModel):
    total_count: int = Field(description="The total number of secrets.")
    secrets: list[Secret] = Field(default_factory=list, description="The secrets of this page.")


class OrganizationSecretsList(GitHubModel):
    total_count: int = Field(description="The total number of secrets.")
    secrets: list[OrganizationSecret] = Field(default_factory=list, description="The secrets of this page.")


class SelectedRepositoriesList(GitHubModel):
    total_count: int = Field(description="The total number of repositories that can access the secret.")
    repositories: list[Repository] = Field(default_factory=list, description="The repositories of this page.")
