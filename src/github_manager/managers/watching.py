from github_manager.clients.github import JSON, GitHubManager, ReturnFormat
from github_manager.clients.models.github import Repository, SimpleUser
from github_manager.managers.shared.annotations import ERROR_ON_NOT_FOUND, OWNER, PAGE, PER_PAGE, REPO, RETURN_FORMAT, USERNAME
from github_manager.models.activity import RepositorySubscription


class WatchingManager(GitHubManager):
    """Repository watching, i.e. notification subscriptions."""

    def list_watchers(
        self,
        owner: OWNER,
        repo: REPO,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[SimpleUser] | JSON | str | None:
        """List the people watching a repository."""

        return self._perform_rest_request(
            action="List watchers",
            response_model=list[SimpleUser],
            path=f"/repos/{owner}/{repo}/subscribers",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def get_repository_subscription(
        self,
        owner: OWNER,
        repo: REPO,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> RepositorySubscription | JSON | str | None:
        """Get the authenticated user's subscription to a repository; None if the user is not watching it."""

        return self._perform_rest_request(
            action="Get repository subscription",
            response_model=RepositorySubscription,
            path=f"/repos/{owner}/{repo}/subscription",
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )

    def set_repository_subscription(
        self,
        owner: OWNER,
        repo: REPO,
        subscribed: bool | None = None,
        ignored: bool | None = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> RepositorySubscription | JSON | str | None:
        """Watch a repository, or ignore its notifications when `ignored` is True."""

        return self._perform_rest_request(
            action="Set repository subscription",
            response_model=RepositorySubscription,
            method="PUT",
            path=f"/repos/{owner}/{repo}/subscription",
            body={"subscribed": subscribed, "ignored": ignored},
            return_format=return_format,
        )

    def delete_repository_subscription(self, owner: OWNER, repo: REPO) -> bool:
        """Stop watching a repository."""

        return self._perform_status_request(
            action="Delete repository subscription",
            method="DELETE",
            path=f"/repos/{owner}/{repo}/subscription",
        )

    def list_watched_repositories(
        self,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Repository] | JSON | str | None:
        """List the repositories the authenticated user is watching."""

        return self._perform_rest_request(
            action="List watched repositories",
            response_model=list[Repository],
            path="/user/subscriptions",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def list_user_watched_repositories(
        self,
        username: USERNAME,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[Repository] | JSON | str | None:
        return self._perform_rest_request(
            action="List user watched repositories",
            response_model=list[Repository],
            path=f"/users/{username}/subscriptions",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )
