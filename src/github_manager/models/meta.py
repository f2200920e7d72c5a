from typing import Any

from pydantic import Field

from github_manager.clients.models.github import GitHubModel, LicenseSimple


class GitignoreTemplate(GitHubModel):
    name: str = Field(description="The name of the template, i.e. 'Python'.")
    source: str = Field(description="The content of the template.")


class License(LicenseSimple):
    """A license with its full text and conditions."""

    html_url: str | None = None
    description: str | None = None
    implementation: str | None = None
    permissions: list[str] = Field(default_factory=list)
    conditions: list[str] = Field(default_factory=list)
    limitations: list[str] = Field(default_factory=list)
    body: str | None = Field(default=None, description="The full text of the license.")
    featured: bool = False


class RepositoryLicense(GitHubModel):
    """The license file of a repository."""

    name: str = Field(description="The name of the license file.")
    path: str = Field(description="The path of the license file.")
    sha: str | None = None
    size: int | None = None
    url: str | None = None
    html_url: str | None = None
    download_url: str | None = None
    type: str | None = None
    content: str | None = Field(default=None, description="The content of the license file, encoded as described by `encoding`.")
    encoding: str | None = None
    license: LicenseSimple | None = Field(default=None, description="The license detected in the file.")


class ApiOverview(GitHubModel):
    """Information about GitHub.com, mostly the IP ranges of its services."""

    verifiable_password_authentication: bool = False
    ssh_key_fingerprints: dict[str, str] | None = None
    ssh_keys: list[str] | None = None
    hooks: list[str] | None = None
    web: list[str] | None = None
    api: list[str] | None = None
    git: list[str] | None = None
    packages: list[str] | None = None
    pages: list[str] | None = None
    importer: list[str] | None = None
    actions: list[str] | None = None
    dependabot: list[str] | None = None
    domains: dict[str, Any] | None = None
