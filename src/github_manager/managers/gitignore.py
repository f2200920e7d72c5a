from github_manager.clients.github import JSON, GitHubManager, ReturnFormat, path_segment
from github_manager.managers.shared.annotations import ERROR_ON_NOT_FOUND, RETURN_FORMAT
from github_manager.models.meta import GitignoreTemplate


class GitignoreManager(GitHubManager):
    """The .gitignore templates GitHub offers when creating a repository."""

    def list_templates(self, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT) -> list[str] | JSON | str | None:
        return self._perform_rest_request(
            action="List gitignore templates",
            response_model=list[str],
            path="/gitignore/templates",
            return_format=return_format,
        )

    def get_template(
        self,
        name: str,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> GitignoreTemplate | JSON | str | None:
        """Get a .gitignore template by name, i.e. 'Python'."""

        return self._perform_rest_request(
            action="Get gitignore template",
            response_model=GitignoreTemplate,
            path=f"/gitignore/templates/{path_segment(name)}",
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )
