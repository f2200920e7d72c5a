from datetime import datetime

from pydantic import Field

from github_manager.clients.models.github import GitHubModel, Repository, SimpleUser


class RepositoryPermissions(GitHubModel):
    pull: bool = False
    triage: bool = False
    push: bool = False
    maintain: bool = False
    admin: bool = False


class Collaborator(SimpleUser):
    """A user with access to a repository."""

    permissions: RepositoryPermissions | None = Field(default=None, description="The permissions of the collaborator.")
    role_name: str | None = Field(default=None, description="The name of the role of the collaborator.")


class CollaboratorPermission(GitHubModel):
    """The permission a user has on a repository."""

    permission: str = Field(description="The permission: one of 'admin', 'write', 'read' or 'none'.")
    role_name: str | None = Field(default=None, description="The name of the role, which may be a custom role.")
    user: Collaborator | None = Field(default=None, description="The user the permission applies to.")


class RepositoryInvitation(GitHubModel):
    """An invitation to collaborate on a repository."""

    id: int = Field(description="The unique identifier of the invitation.")
    node_id: str | None = Field(default=None, description="The GraphQL node id of the invitation.")
    repository: Repository | None = Field(default=None, description="The repository the invitation is for.")
    invitee: SimpleUser | None = Field(default=None, description="The invited user.")
    inviter: SimpleUser | None = Field(default=None, description="The user who sent the invitation.")
    permissions: str = Field(description="The permission associated with the invitation.")
    created_at: datetime | None = Field(default=None, description="The date and time the invitation was created.")
    expired: bool = Field(default=False, description="Whether the invitation has expired.")
    url: str | None = Field(default=None, description="The API URL of the invitation.")
    html_url: str | None = Field(default=None, description="The web URL of the invitation.")
