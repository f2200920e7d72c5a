from datetime import datetime

from pydantic import Field

from github_manager.clients.models.github import GitHubModel


class RepositorySubscription(GitHubModel):
    """The authenticated user's watch settings for a repository."""

    subscribed: bool = Field(description="Whether notifications should be received from this repository.")
    ignored: bool = Field(description="Whether all notifications should be blocked from this repository.")
    reason: str | None = Field(default=None, description="The reason for the subscription.")
    created_at: datetime | None = Field(default=None, description="The date and time the subscription was created.")
    url: str | None = Field(default=None, description="The API URL of the subscription.")
    repository_url: str | None = Field(default=None, description="The API URL of the repository.")
