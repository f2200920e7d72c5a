from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class GitHubModel(BaseModel):
    """A record mirroring a GitHub JSON object.

    Records are frozen and keep any field GitHub returns that is not declared on the model.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="allow")


class SimpleUser(GitHubModel):
    """A GitHub user or organization account."""

    login: str = Field(description="The login of the account.")
    id: int = Field(description="The id of the account.")
    node_id: str | None = Field(default=None, description="The GraphQL node id of the account.")
    avatar_url: str | None = Field(default=None, description="The URL of the account avatar.")
    url: str | None = Field(default=None, description="The API URL of the account.")
    html_url: str | None = Field(default=None, description="The web URL of the account.")
    type: str | None = Field(default=None, description="The type of the account, i.e. 'User' or 'Organization'.")
    site_admin: bool = Field(default=False, description="Whether the account is a site administrator.")
    name: str | None = Field(default=None, description="The display name of the account.")
    email: str | None = Field(default=None, description="The public email of the account.")


class LicenseSimple(GitHubModel):
    """A license as referenced from a repository or the licenses listing."""

    key: str = Field(description="The key of the license, i.e. 'mit'.")
    name: str = Field(description="The name of the license.")
    spdx_id: str | None = Field(default=None, description="The SPDX identifier of the license.")
    url: str | None = Field(default=None, description="The API URL of the license.")
    node_id: str | None = Field(default=None, description="The GraphQL node id of the license.")


class Repository(GitHubModel):
    """A repository as returned by the listing endpoints."""

    id: int = Field(description="The id of the repository.")
    node_id: str | None = Field(default=None, description="The GraphQL node id of the repository.")
    name: str = Field(description="The name of the repository.")
    full_name: str = Field(description="The name of the repository including its owner.")
    owner: SimpleUser = Field(description="The owner of the repository.")
    private: bool = Field(default=False, description="Whether the repository is private.")
    html_url: str | None = Field(default=None, description="The web URL of the repository.")
    description: str | None = Field(default=None, description="The description of the repository.")
    fork: bool = Field(default=False, description="Whether the repository is a fork.")
    url: str | None = Field(default=None, description="The API URL of the repository.")
    language: str | None = Field(default=None, description="The language of the repository.")
    default_branch: str | None = Field(default=None, description="The default branch of the repository.")
    stargazers_count: int | None = Field(default=None, description="The number of stars the repository has.")
    watchers_count: int | None = Field(default=None, description="The number of watchers the repository has.")
    archived: bool = Field(default=False, description="Whether the repository is archived.")
    visibility: str | None = Field(default=None, description="The visibility of the repository.")
    topics: list[str] = Field(default_factory=list, description="The topics of the repository.")
    license: LicenseSimple | None = Field(default=None, description="The license of the repository.")
    created_at: datetime | None = Field(default=None, description="The date and time the repository was created.")
    updated_at: datetime | None = Field(default=None, description="The date and time the repository was updated.")
    pushed_at: datetime | None = Field(default=None, description="The date and time the repository was pushed to.")

    @property
    def owner_login(self) -> str:
        return self.owner.login
