from typing import Literal

from github_manager.clients.github import JSON, Direction, GitHubManager, ReturnFormat
from github_manager.clients.models.github import Repository, SimpleUser
from github_manager.managers.shared.annotations import OWNER, PAGE, PER_PAGE, REPO, RETURN_FORMAT, USERNAME

StarredSort = Literal["created", "updated"]


class StarringManager(GitHubManager):
    """Repository starring."""

    def list_stargazers(
        self,
        owner: OWNER,
        repo: REPO,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[SimpleUser] | JSON | str | None:
        return self._perform_rest_request(
            action="List stargazers",
            response_model=list[SimpleUser],
            path=f"/repos/{owner}/{repo}/stargazers",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def list_starred_repositories(
        self,
        sort: StarredSort | None = None,
        direction: Direction | None = None,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Repository] | JSON | str | None:
        """List the repositories starred by the authenticated user."""

        return self._perform_rest_request(
            action="List starred repositories",
            response_model=list[Repository],
            path="/user/starred",
            params={"sort": sort, "direction": direction, "page": page, "per_page": per_page},
            return_format=return_format,
        )

    def list_user_starred_repositories(
        self,
        username: USERNAME,
        sort: StarredSort | None = None,
        direction: Direction | None = None,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Repository] | JSON | str | None:
        return self._perform_rest_request(
            action="List user starred repositories",
            response_model=list[Repository],
            path=f"/users/{username}/starred",
            params={"sort": sort, "direction": direction, "page": page, "per_page": per_page},
            return_format=return_format,
        )

    def is_repository_starred(self, owner: OWNER, repo: REPO) -> bool:
        """Check whether the authenticated user has starred a repository."""

        return self._perform_check_request(action="Check repository starred", path=f"/user/starred/{owner}/{repo}")

    def star_repository(self, owner: OWNER, repo: REPO) -> bool:
        return self._perform_status_request(action="Star repository", method="PUT", path=f"/user/starred/{owner}/{repo}")

    def unstar_repository(self, owner: OWNER, repo: REPO) -> bool:
        return self._perform_status_request(action="Unstar repository", method="DELETE", path=f"/user/starred/{owner}/{repo}")
