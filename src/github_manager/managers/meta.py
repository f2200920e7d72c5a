from github_manager.clients.github import JSON, GitHubManager, ReturnFormat
from github_manager.managers.shared.annotations import RETURN_FORMAT
from github_manager.models.meta import ApiOverview


class MetaManager(GitHubManager):
    """Meta information about GitHub and its REST API."""

    def get_root(self) -> dict[str, str]:
        """Get the hypermedia links to the top-level resources of the REST API."""

        return self._perform_rest_request(action="Get API root", response_model=dict[str, str], path="/", error_on_not_found=True)

    def get_meta(self, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT) -> ApiOverview | JSON | str | None:
        return self._perform_rest_request(
            action="Get GitHub meta information",
            response_model=ApiOverview,
            path="/meta",
            return_format=return_format,
        )

    def get_octocat(self, s: str | None = None) -> str:
        """Get the octocat as ASCII art, saying `s` if provided."""

        return self._perform_rest_request(
            action="Get octocat",
            response_model=str,
            path="/octocat",
            params={"s": s},
            return_format=ReturnFormat.STRING,
            error_on_not_found=True,
        )

    def get_versions(self, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT) -> list[str] | JSON | str | None:
        """Get the supported REST API versions, i.e. '2022-11-28'."""

        return self._perform_rest_request(
            action="Get API versions",
            response_model=list[str],
            path="/versions",
            return_format=return_format,
        )

    def get_zen(self) -> str:
        """Get a random sentence from the Zen of GitHub."""

        return self._perform_rest_request(
            action="Get zen",
            response_model=str,
            path="/zen",
            return_format=ReturnFormat.STRING,
            error_on_not_found=True,
        )
