import httpx
import pytest
from nacl.public import PrivateKey

from github_manager.clients.github import ReturnFormat, Visibility
from github_manager.managers.secrets import SecretsManager
from github_manager.models.secrets import OrganizationSecret, OrganizationSecretsList, PublicKey, Secret, SecretsList
from tests.conftest import FakeGitHub, decrypt_secret, request_json, request_params
from tests.constants import ORG, OWNER, REPO, REPOSITORY_ID, repository_payload, secret_payload

REPOSITORY_SECRETS = f"/repos/{OWNER}/{REPO}/actions/secrets"
ORGANIZATION_SECRETS = f"/orgs/{ORG}/actions/secrets"
ENVIRONMENT_SECRETS = f"/repositories/{REPOSITORY_ID}/environments/production/secrets"


@pytest.fixture
def secrets_manager(http_client: httpx.Client) -> SecretsManager:
    return SecretsManager(http_client=http_client)


class TestRepositorySecrets:
    def test_list_repository_secrets(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("GET", REPOSITORY_SECRETS, json={"total_count": 2, "secrets": [secret_payload("GH_TOKEN"), secret_payload("GIST_ID")]})

        secrets = secrets_manager.list_repository_secrets(owner=OWNER, repo=REPO, per_page=2)

        assert isinstance(secrets, SecretsList)
        assert secrets.total_count == 2
        assert [secret.name for secret in secrets.secrets] == ["GH_TOKEN", "GIST_ID"]
        assert secrets.secrets[0].created_at.year == 2019
        assert request_params(fake_github.last_request) == {"per_page": "2"}

    def test_get_repository_public_key(self, secrets_manager: SecretsManager, fake_github: FakeGitHub, public_key_payload: dict[str, str]):
        fake_github.add("GET", f"{REPOSITORY_SECRETS}/public-key", json=public_key_payload)

        public_key = secrets_manager.get_repository_public_key(owner=OWNER, repo=REPO)

        assert public_key == PublicKey(**public_key_payload)

    def test_get_repository_secret(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("GET", f"{REPOSITORY_SECRETS}/GH_TOKEN", json=secret_payload())

        secret = secrets_manager.get_repository_secret(owner=OWNER, repo=REPO, secret_name="GH_TOKEN")

        assert isinstance(secret, Secret)
        assert secret.name == "GH_TOKEN"

    def test_get_missing_repository_secret(self, secrets_manager: SecretsManager):
        assert secrets_manager.get_repository_secret(owner=OWNER, repo=REPO, secret_name="MISSING") is None
        assert secrets_manager.status_code == 404

    def test_create_repository_secret(
        self, secrets_manager: SecretsManager, fake_github: FakeGitHub, private_key: PrivateKey, public_key_payload: dict[str, str]
    ):
        fake_github.add("GET", f"{REPOSITORY_SECRETS}/public-key", json=public_key_payload)
        fake_github.add("PUT", f"{REPOSITORY_SECRETS}/GH_TOKEN", status_code=201)

        assert secrets_manager.create_or_update_repository_secret(owner=OWNER, repo=REPO, secret_name="GH_TOKEN", secret_value="hunter2")

        body = request_json(fake_github.last_request)
        assert body["key_id"] == public_key_payload["key_id"]
        assert decrypt_secret(private_key=private_key, encrypted_value=body["encrypted_value"]) == "hunter2"

    def test_update_repository_secret_with_known_key(
        self, secrets_manager: SecretsManager, fake_github: FakeGitHub, private_key: PrivateKey, public_key_payload: dict[str, str]
    ):
        fake_github.add("PUT", f"{REPOSITORY_SECRETS}/GH_TOKEN", status_code=204)

        assert secrets_manager.create_or_update_repository_secret(
            owner=OWNER, repo=REPO, secret_name="GH_TOKEN", secret_value="rotated", public_key=PublicKey(**public_key_payload)
        )

        assert len(fake_github.requests) == 1
        assert decrypt_secret(private_key=private_key, encrypted_value=request_json(fake_github.last_request)["encrypted_value"]) == "rotated"

    def test_create_repository_secret_without_public_key(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        assert not secrets_manager.create_or_update_repository_secret(owner=OWNER, repo=REPO, secret_name="GH_TOKEN", secret_value="hunter2")

        assert fake_github.requests_to("PUT", f"{REPOSITORY_SECRETS}/GH_TOKEN") == []

    def test_create_repository_secret_public_key_error(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("GET", f"{REPOSITORY_SECRETS}/public-key", status_code=403, json={"message": "Resource not accessible"})

        assert not secrets_manager.create_or_update_repository_secret(owner=OWNER, repo=REPO, secret_name="GH_TOKEN", secret_value="hunter2")
        assert secrets_manager.status_code == 403

    def test_create_repository_secret_rejected(
        self, secrets_manager: SecretsManager, fake_github: FakeGitHub, public_key_payload: dict[str, str]
    ):
        fake_github.add("GET", f"{REPOSITORY_SECRETS}/public-key", json=public_key_payload)
        fake_github.add("PUT", f"{REPOSITORY_SECRETS}/GH_TOKEN", status_code=422, json={"message": "Bad request"})

        assert not secrets_manager.create_or_update_repository_secret(owner=OWNER, repo=REPO, secret_name="GH_TOKEN", secret_value="hunter2")
        assert secrets_manager.error_response_json == {"message": "Bad request"}

    def test_delete_repository_secret(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("DELETE", f"{REPOSITORY_SECRETS}/GH_TOKEN", status_code=204)

        assert secrets_manager.delete_repository_secret(owner=OWNER, repo=REPO, secret_name="GH_TOKEN")
        assert not secrets_manager.delete_repository_secret(owner=OWNER, repo=REPO, secret_name="MISSING")
        assert secrets_manager.status_code == 404


class TestOrganizationSecrets:
    def test_list_organization_secrets(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add(
            "GET",
            ORGANIZATION_SECRETS,
            json={
                "total_count": 2,
                "secrets": [
                    {**secret_payload("GIST_ID"), "visibility": "private"},
                    {
                        **secret_payload("DEPLOY_TOKEN"),
                        "visibility": "selected",
                        "selected_repositories_url": f"https://api.github.com/orgs/{ORG}/actions/secrets/DEPLOY_TOKEN/repositories",
                    },
                ],
            },
        )

        secrets = secrets_manager.list_organization_secrets(org=ORG)

        assert isinstance(secrets, OrganizationSecretsList)
        assert [secret.visibility for secret in secrets.secrets] == ["private", "selected"]
        assert secrets.secrets[0].selected_repositories_url is None

    def test_get_organization_secret(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("GET", f"{ORGANIZATION_SECRETS}/GIST_ID", json={**secret_payload("GIST_ID"), "visibility": "all"})

        secret = secrets_manager.get_organization_secret(org=ORG, secret_name="GIST_ID")

        assert isinstance(secret, OrganizationSecret)
        assert secret.visibility == "all"

    def test_create_organization_secret(
        self, secrets_manager: SecretsManager, fake_github: FakeGitHub, private_key: PrivateKey, public_key_payload: dict[str, str]
    ):
        fake_github.add("GET", f"{ORGANIZATION_SECRETS}/public-key", json=public_key_payload)
        fake_github.add("PUT", f"{ORGANIZATION_SECRETS}/DEPLOY_TOKEN", status_code=201)

        assert secrets_manager.create_or_update_organization_secret(
            org=ORG,
            secret_name="DEPLOY_TOKEN",
            secret_value="hunter2",
            visibility=Visibility.SELECTED,
            selected_repository_ids=[1296269, 1296270],
        )

        body = request_json(fake_github.last_request)
        assert body["visibility"] == "selected"
        assert body["selected_repository_ids"] == [1296269, 1296270]
        assert decrypt_secret(private_key=private_key, encrypted_value=body["encrypted_value"]) == "hunter2"

    def test_create_organization_secret_for_all_repositories(
        self, secrets_manager: SecretsManager, fake_github: FakeGitHub, public_key_payload: dict[str, str]
    ):
        fake_github.add("PUT", f"{ORGANIZATION_SECRETS}/GIST_ID", status_code=204)

        assert secrets_manager.create_or_update_organization_secret(
            org=ORG, secret_name="GIST_ID", secret_value="value", visibility=Visibility.ALL, public_key=PublicKey(**public_key_payload)
        )

        body = request_json(fake_github.last_request)
        assert body["visibility"] == "all"
        assert "selected_repository_ids" not in body

    def test_delete_organization_secret(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("DELETE", f"{ORGANIZATION_SECRETS}/GIST_ID", status_code=204)

        assert secrets_manager.delete_organization_secret(org=ORG, secret_name="GIST_ID")

    def test_selected_repositories(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        path = f"{ORGANIZATION_SECRETS}/DEPLOY_TOKEN/repositories"
        fake_github.add("GET", path, json={"total_count": 1, "repositories": [repository_payload()]})
        fake_github.add("PUT", path, status_code=204)
        fake_github.add("PUT", f"{path}/42", status_code=204)
        fake_github.add("DELETE", f"{path}/42", status_code=204)

        repositories = secrets_manager.list_selected_repositories_for_organization_secret(org=ORG, secret_name="DEPLOY_TOKEN")
        assert repositories is not None
        assert [repository.full_name for repository in repositories.repositories] == [f"{OWNER}/{REPO}"]

        assert secrets_manager.set_selected_repositories_for_organization_secret(org=ORG, secret_name="DEPLOY_TOKEN", selected_repository_ids=[42])
        assert request_json(fake_github.last_request) == {"selected_repository_ids": [42]}

        assert secrets_manager.add_selected_repository_to_organization_secret(org=ORG, secret_name="DEPLOY_TOKEN", repository_id=42)
        assert secrets_manager.remove_selected_repository_from_organization_secret(org=ORG, secret_name="DEPLOY_TOKEN", repository_id=42)
        assert not secrets_manager.remove_selected_repository_from_organization_secret(org=ORG, secret_name="DEPLOY_TOKEN", repository_id=7)

    def test_add_selected_repository_to_secret_without_selected_visibility(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("PUT", f"{ORGANIZATION_SECRETS}/GIST_ID/repositories/42", status_code=409, json={"message": "Conflict"})

        assert not secrets_manager.add_selected_repository_to_organization_secret(org=ORG, secret_name="GIST_ID", repository_id=42)
        assert secrets_manager.status_code == 409

    def test_set_selected_repositories_for_secret_without_selected_visibility(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("PUT", f"{ORGANIZATION_SECRETS}/GIST_ID/repositories", status_code=409, json={"message": "Conflict"})

        assert not secrets_manager.set_selected_repositories_for_organization_secret(
            org=ORG, secret_name="GIST_ID", selected_repository_ids=[42, 43]
        )
        assert secrets_manager.status_code == 409


class TestEnvironmentSecrets:
    def test_list_environment_secrets(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("GET", ENVIRONMENT_SECRETS, json={"total_count": 1, "secrets": [secret_payload()]})

        secrets = secrets_manager.list_environment_secrets(repository_id=REPOSITORY_ID, environment_name="production")

        assert isinstance(secrets, SecretsList)
        assert secrets.total_count == 1

    def test_list_environment_secrets_as_json(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        payload = {"total_count": 1, "secrets": [secret_payload()]}
        fake_github.add("GET", ENVIRONMENT_SECRETS, json=payload)

        secrets = secrets_manager.list_environment_secrets(
            repository_id=REPOSITORY_ID, environment_name="production", return_format=ReturnFormat.JSON
        )

        assert secrets == payload

    def test_get_environment_secret(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("GET", f"{ENVIRONMENT_SECRETS}/GH_TOKEN", json=secret_payload())

        secret = secrets_manager.get_environment_secret(repository_id=REPOSITORY_ID, environment_name="production", secret_name="GH_TOKEN")

        assert isinstance(secret, Secret)

    def test_create_and_delete_environment_secret(
        self, secrets_manager: SecretsManager, fake_github: FakeGitHub, private_key: PrivateKey, public_key_payload: dict[str, str]
    ):
        fake_github.add("GET", f"{ENVIRONMENT_SECRETS}/public-key", json=public_key_payload)
        fake_github.add("PUT", f"{ENVIRONMENT_SECRETS}/GH_TOKEN", status_code=201)
        fake_github.add("DELETE", f"{ENVIRONMENT_SECRETS}/GH_TOKEN", status_code=204)

        assert secrets_manager.create_or_update_environment_secret(
            repository_id=REPOSITORY_ID, environment_name="production", secret_name="GH_TOKEN", secret_value="hunter2"
        )
        assert decrypt_secret(private_key=private_key, encrypted_value=request_json(fake_github.last_request)["encrypted_value"]) == "hunter2"

        assert secrets_manager.delete_environment_secret(repository_id=REPOSITORY_ID, environment_name="production", secret_name="GH_TOKEN")

    def test_environment_name_with_slash(self, secrets_manager: SecretsManager, fake_github: FakeGitHub):
        fake_github.add("GET", f"/repositories/{REPOSITORY_ID}/environments/prod%2Feu/secrets/GH_TOKEN", json=secret_payload())

        secret = secrets_manager.get_environment_secret(repository_id=REPOSITORY_ID, environment_name="prod/eu", secret_name="GH_TOKEN")

        assert isinstance(secret, Secret)
        assert fake_github.last_request.url.raw_path == f"/repositories/{REPOSITORY_ID}/environments/prod%2Feu/secrets/GH_TOKEN".encode()
