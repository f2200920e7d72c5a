from collections.abc import Callable, Sequence

from github_manager.clients.errors.github import RequestError
from github_manager.clients.github import CREATED, JSON, NO_CONTENT, GitHubManager, ReturnFormat, Visibility, path_segment
from github_manager.managers.shared.annotations import (
    ENVIRONMENT_NAME,
    ERROR_ON_NOT_FOUND,
    ORG,
    OWNER,
    PAGE,
    PER_PAGE,
    REPO,
    REPOSITORY_ID,
    RETURN_FORMAT,
    SECRET_NAME,
)
from github_manager.models.secrets import (
    OrganizationSecret,
    OrganizationSecretsList,
    PublicKey,
    Secret,
    SecretsList,
    SelectedRepositoriesList,
)
from github_manager.utilities.encryption import encrypt_secret

SECRET_WRITE_SUCCESS_CODES = (CREATED, NO_CONTENT)


def repository_secrets_path(owner: str, repo: str) -> str:
    return f"/repos/{owner}/{repo}/actions/secrets"


def organization_secrets_path(org: str) -> str:
    return f"/orgs/{org}/actions/secrets"


def environment_secrets_path(repository_id: int, environment_name: str) -> str:
    return f"/repositories/{repository_id}/environments/{path_segment(environment_name)}/secrets"


class SecretsManager(GitHubManager):
    """GitHub Actions secrets at the repository, organization and environment level."""

    # Repository secrets

    def list_repository_secrets(
        self,
        owner: OWNER,
        repo: REPO,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> SecretsList | JSON | str | None:
        """List the secrets available in a repository without revealing their values."""

        return self._perform_rest_request(
            action="List repository secrets",
            response_model=SecretsList,
            path=repository_secrets_path(owner, repo),
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def get_repository_public_key(
        self, owner: OWNER, repo: REPO, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> PublicKey | JSON | str | None:
        return self._perform_rest_request(
            action="Get repository public key",
            response_model=PublicKey,
            path=f"{repository_secrets_path(owner, repo)}/public-key",
            return_format=return_format,
        )

    def get_repository_secret(
        self,
        owner: OWNER,
        repo: REPO,
        secret_name: SECRET_NAME,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> Secret | JSON | str | None:
        return self._perform_rest_request(
            action="Get repository secret",
            response_model=Secret,
            path=f"{repository_secrets_path(owner, repo)}/{path_segment(secret_name)}",
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )

    def create_or_update_repository_secret(
        self, owner: OWNER, repo: REPO, secret_name: SECRET_NAME, secret_value: str, public_key: PublicKey | None = None
    ) -> bool:
        """Create or update a repository secret.

        The value is encrypted with the repository public key, which is fetched first unless it is provided.
        """

        if public_key is None:
            public_key = self._fetch_public_key(lambda: self.get_repository_public_key(owner=owner, repo=repo))

            if public_key is None:
                return False

        return self._perform_status_request(
            action="Create or update repository secret",
            method="PUT",
            path=f"{repository_secrets_path(owner, repo)}/{path_segment(secret_name)}",
            body=self._build_secret_body(secret_value=secret_value, public_key=public_key),
            success_codes=SECRET_WRITE_SUCCESS_CODES,
        )

    def delete_repository_secret(self, owner: OWNER, repo: REPO, secret_name: SECRET_NAME) -> bool:
        return self._perform_status_request(
            action="Delete repository secret",
            method="DELETE",
            path=f"{repository_secrets_path(owner, repo)}/{path_segment(secret_name)}",
        )

    # Organization secrets

    def list_organization_secrets(
        self,
        org: ORG,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> OrganizationSecretsList | JSON | str | None:
        return self._perform_rest_request(
            action="List organization secrets",
            response_model=OrganizationSecretsList,
            path=organization_secrets_path(org),
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def get_organization_public_key(
        self, org: ORG, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> PublicKey | JSON | str | None:
        return self._perform_rest_request(
            action="Get organization public key",
            response_model=PublicKey,
            path=f"{organization_secrets_path(org)}/public-key",
            return_format=return_format,
        )

    def get_organization_secret(
        self,
        org: ORG,
        secret_name: SECRET_NAME,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> OrganizationSecret | JSON | str | None:
        return self._perform_rest_request(
            action="Get organization secret",
            response_model=OrganizationSecret,
            path=f"{organization_secrets_path(org)}/{path_segment(secret_name)}",
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )

    def create_or_update_organization_secret(
        self,
        org: ORG,
        secret_name: SECRET_NAME,
        secret_value: str,
        visibility: Visibility,
        selected_repository_ids: Sequence[int] | None = None,
        public_key: PublicKey | None = None,
    ) -> bool:
        """Create or update an organization secret.

        Args:
            org: The organization name.
            secret_name: The name of the secret.
            secret_value: The plain text value, encrypted before it leaves the process.
            visibility: Which repositories of the organization can access the secret.
            selected_repository_ids: The repositories that can access the secret, only used when the visibility is 'selected'.
            public_key: The organization public key; fetched when not provided.
        """

        if public_key is None:
            public_key = self._fetch_public_key(lambda: self.get_organization_public_key(org=org))

            if public_key is None:
                return False

        body = self._build_secret_body(secret_value=secret_value, public_key=public_key)
        body["visibility"] = visibility

        if selected_repository_ids is not None:
            body["selected_repository_ids"] = list(selected_repository_ids)

        return self._perform_status_request(
            action="Create or update organization secret",
            method="PUT",
            path=f"{organization_secrets_path(org)}/{path_segment(secret_name)}",
            body=body,
            success_codes=SECRET_WRITE_SUCCESS_CODES,
        )

    def delete_organization_secret(self, org: ORG, secret_name: SECRET_NAME) -> bool:
        return self._perform_status_request(
            action="Delete organization secret",
            method="DELETE",
            path=f"{organization_secrets_path(org)}/{path_segment(secret_name)}",
        )

    def list_selected_repositories_for_organization_secret(
        self,
        org: ORG,
        secret_name: SECRET_NAME,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> SelectedRepositoriesList | JSON | str | None:
        """List the repositories that can access an organization secret with 'selected' visibility."""

        return self._perform_rest_request(
            action="List selected repositories for organization secret",
            response_model=SelectedRepositoriesList,
            path=f"{organization_secrets_path(org)}/{path_segment(secret_name)}/repositories",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def set_selected_repositories_for_organization_secret(
        self, org: ORG, secret_name: SECRET_NAME, selected_repository_ids: Sequence[int]
    ) -> bool:
        """Replace the repositories that can access an organization secret with 'selected' visibility."""

        return self._perform_status_request(
            action="Set selected repositories for organization secret",
            method="PUT",
            path=f"{organization_secrets_path(org)}/{path_segment(secret_name)}/repositories",
            body={"selected_repository_ids": list(selected_repository_ids)},
        )

    def add_selected_repository_to_organization_secret(self, org: ORG, secret_name: SECRET_NAME, repository_id: REPOSITORY_ID) -> bool:
        return self._perform_status_request(
            action="Add selected repository to organization secret",
            method="PUT",
            path=f"{organization_secrets_path(org)}/{path_segment(secret_name)}/repositories/{repository_id}",
        )

    def remove_selected_repository_from_organization_secret(
        self, org: ORG, secret_name: SECRET_NAME, repository_id: REPOSITORY_ID
    ) -> bool:
        return self._perform_status_request(
            action="Remove selected repository from organization secret",
            method="DELETE",
            path=f"{organization_secrets_path(org)}/{path_segment(secret_name)}/repositories/{repository_id}",
        )

    # Environment secrets

    def list_environment_secrets(
        self,
        repository_id: REPOSITORY_ID,
        environment_name: ENVIRONMENT_NAME,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> SecretsList | JSON | str | None:
        return self._perform_rest_request(
            action="List environment secrets",
            response_model=SecretsList,
            path=environment_secrets_path(repository_id, environment_name),
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def get_environment_public_key(
        self, repository_id: REPOSITORY_ID, environment_name: ENVIRONMENT_NAME, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> PublicKey | JSON | str | None:
        return self._perform_rest_request(
            action="Get environment public key",
            response_model=PublicKey,
            path=f"{environment_secrets_path(repository_id, environment_name)}/public-key",
            return_format=return_format,
        )

    def get_environment_secret(
        self,
        repository_id: REPOSITORY_ID,
        environment_name: ENVIRONMENT_NAME,
        secret_name: SECRET_NAME,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: ERROR_ON_NOT_FOUND = False,
    ) -> Secret | JSON | str | None:
        return self._perform_rest_request(
            action="Get environment secret",
            response_model=Secret,
            path=f"{environment_secrets_path(repository_id, environment_name)}/{path_segment(secret_name)}",
            return_format=return_format,
            error_on_not_found=error_on_not_found,
        )

    def create_or_update_environment_secret(
        self,
        repository_id: REPOSITORY_ID,
        environment_name: ENVIRONMENT_NAME,
        secret_name: SECRET_NAME,
        secret_value: str,
        public_key: PublicKey | None = None,
    ) -> bool:
        if public_key is None:
            public_key = self._fetch_public_key(
                lambda: self.get_environment_public_key(repository_id=repository_id, environment_name=environment_name)
            )

            if public_key is None:
                return False

        return self._perform_status_request(
            action="Create or update environment secret",
            method="PUT",
            path=f"{environment_secrets_path(repository_id, environment_name)}/{path_segment(secret_name)}",
            body=self._build_secret_body(secret_value=secret_value, public_key=public_key),
            success_codes=SECRET_WRITE_SUCCESS_CODES,
        )

    def delete_environment_secret(self, repository_id: REPOSITORY_ID, environment_name: ENVIRONMENT_NAME, secret_name: SECRET_NAME) -> bool:
        return self._perform_status_request(
            action="Delete environment secret",
            method="DELETE",
            path=f"{environment_secrets_path(repository_id, environment_name)}/{path_segment(secret_name)}",
        )

    def _fetch_public_key(self, fetch: Callable[[], PublicKey | None]) -> PublicKey | None:
        try:
            return fetch()
        except RequestError:
            return None

    @staticmethod
    def _build_secret_body(secret_value: str, public_key: PublicKey) -> dict[str, object]:
        return {
            "encrypted_value": encrypt_secret(public_key=public_key.key, secret_value=secret_value),
            "key_id": public_key.key_id,
        }
