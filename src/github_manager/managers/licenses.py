from github_manager.clients.github import JSON, GitHubManager, ReturnFormat, path_segment
from github_manager.clients.models.github import LicenseSimple
from github_manager.managers.shared.annotations import ERROR_ON_NOT_FOUND, OWNER, PAGE, PER_PAGE, REPO, RETURN_FORMAT
from github_manager.models.meta import License, RepositoryLicense


class LicensesManager(GitHubManager):
    """Open source licenses and the license of a repository."""

    def list_licenses(
        self,
        featured: bool | None = None,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> list[LicenseSimple] | JSON | str | None:
        """List the most commonly used licenses on GitHub."""

        return self._perform_rest_request(
            action="List licenses",
            response_model=list[LicenseSimple],
            path="/licenses",
            params={"featured": featured, "page": page, "per_page": per_page},
            return_format=return_format,
        )

    def get_license(
        self,
        license_key: str,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> License | JSON | str | None:
        return self._perform_rest_request(
            action="Get license",
            response_model=License,
            path=f"/licenses/{path_segment(license_key)}",
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )

    def get_repository_license(
        self,
        owner: OWNER,
        repo: REPO,
        ref: str | None = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> RepositoryLicense | JSON | str | None:
        """Get the license file of a repository, optionally at a given ref."""

        return self._perform_rest_request(
            action="Get repository license",
            response_model=RepositoryLicense,
            path=f"/repos/{owner}/{repo}/license",
            params={"ref": ref},
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )
