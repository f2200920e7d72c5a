from typing import Literal

from github_manager.clients.github import JSON, GitHubManager, ReturnFormat
from github_manager.managers.shared.annotations import (
    ERROR_ON_NOT_FOUND,
    INVITATION_ID,
    OWNER,
    PAGE,
    PER_PAGE,
    REPO,
    RETURN_FORMAT,
    USERNAME,
)
from github_manager.models.collaborators import Collaborator, CollaboratorPermission, RepositoryInvitation

Affiliation = Literal["outside", "direct", "all"]
Permission = Literal["pull", "triage", "push", "maintain", "admin"]
InvitationPermission = Literal["read", "write", "maintain", "triage", "admin"]


class CollaboratorsManager(GitHubManager):
    """Repository collaborators."""

    def list_collaborators(
        self,
        owner: OWNER,
        repo: REPO,
        affiliation: Affiliation | None = None,
        permission: Permission | None = None,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Collaborator] | JSON | str | None:
        """List the collaborators of a repository, including outside collaborators and organization members."""

        return self._perform_rest_request(
            action="List collaborators",
            response_model=list[Collaborator],
            path=f"/repos/{owner}/{repo}/collaborators",
            params={"affiliation": affiliation, "permission": permission, "page": page, "per_page": per_page},
            return_format=return_format,
        )

    def is_collaborator(self, owner: OWNER, repo: REPO, username: USERNAME) -> bool:
        return self._perform_check_request(action="Check collaborator", path=f"/repos/{owner}/{repo}/collaborators/{username}")

    def add_collaborator(
        self,
        owner: OWNER,
        repo: REPO,
        username: USERNAME,
        permission: Permission | None = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryInvitation | JSON | str | None:
        """Invite a user to collaborate on a repository.

        Returns the invitation that was created, or None when the user already is a collaborator (or an
        organization member with access) and no invitation was needed.
        """

        return self._perform_rest_request(
            action="Add collaborator",
            response_model=RepositoryInvitation,
            method="PUT",
            path=f"/repos/{owner}/{repo}/collaborators/{username}",
            body={"permission": permission},
            return_format=return_format,
        )

    def remove_collaborator(self, owner: OWNER, repo: REPO, username: USERNAME) -> bool:
        return self._perform_status_request(
            action="Remove collaborator",
            method="DELETE",
            path=f"/repos/{owner}/{repo}/collaborators/{username}",
        )

    def get_collaborator_permission(
        self,
        owner: OWNER,
        repo: REPO,
        username: USERNAME,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> CollaboratorPermission | JSON | str | None:
        return self._perform_rest_request(
            action="Get collaborator permission",
            response_model=CollaboratorPermission,
            path=f"/repos/{owner}/{repo}/collaborators/{username}/permission",
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )


class InvitationsManager(GitHubManager):
    """Invitations to collaborate on repositories, from the repository and from the invitee side."""

    def list_repository_invitations(
        self,
        owner: OWNER,
        repo: REPO,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[RepositoryInvitation] | JSON | str | None:
        return self._perform_rest_request(
            action="List repository invitations",
            response_model=list[RepositoryInvitation],
            path=f"/repos/{owner}/{repo}/invitations",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def update_repository_invitation(
        self,
        owner: OWNER,
        repo: REPO,
        invitation_id: INVITATION_ID,
        permissions: InvitationPermission,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositoryInvitation | JSON | str | None:
        return self._perform_rest_request(
            action="Update repository invitation",
            response_model=RepositoryInvitation,
            method="PATCH",
            path=f"/repos/{owner}/{repo}/invitations/{invitation_id}",
            body={"permissions": permissions},
            return_format=return_format,
        )

    def delete_repository_invitation(self, owner: OWNER, repo: REPO, invitation_id: INVITATION_ID) -> bool:
        return self._perform_status_request(
            action="Delete repository invitation",
            method="DELETE",
            path=f"/repos/{owner}/{repo}/invitations/{invitation_id}",
        )

    def list_user_invitations(
        self,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[RepositoryInvitation] | JSON | str | None:
        """List the open repository invitations of the authenticated user."""

        return self._perform_rest_request(
            action="List user invitations",
            response_model=list[RepositoryInvitation],
            path="/user/repository_invitations",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def accept_invitation(self, invitation_id: INVITATION_ID) -> bool:
        return self._perform_status_request(
            action="Accept repository invitation",
            method="PATCH",
            path=f"/user/repository_invitations/{invitation_id}",
        )

    def decline_invitation(self, invitation_id: INVITATION_ID) -> bool:
        return self._perform_status_request(
            action="Decline repository invitation",
            method="DELETE",
            path=f"/user/repository_invitations/{invitation_id}",
        )
