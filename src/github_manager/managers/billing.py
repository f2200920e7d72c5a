from typing import Literal

from github_manager.clients.github import JSON, GitHubManager, ReturnFormat
from github_manager.managers.shared.annotations import ORG, PAGE, PER_PAGE, RETURN_FORMAT, USERNAME
from github_manager.models.billing import ActionsBilling, AdvancedSecurityCommitters, PackagesBilling, SharedStorageBilling

BillingAccount = Literal["orgs", "users"]


def billing_path(account_type: BillingAccount, account: str) -> str:
    return f"/{account_type}/{account}/settings/billing"


class BillingManager(GitHubManager):
    """Billing usage of organizations and users.

    Every endpoint here needs a token with the `admin:org` or `user` scope of the billed account.
    """

    def get_organization_actions_billing(
        self, org: ORG, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> ActionsBilling | JSON | str | None:
        return self._perform_rest_request(
            action="Get organization actions billing",
            response_model=ActionsBilling,
            path=f"{billing_path('orgs', org)}/actions",
            return_format=return_format,
        )

    def get_organization_packages_billing(
        self, org: ORG, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> PackagesBilling | JSON | str | None:
        return self._perform_rest_request(
            action="Get organization packages billing",
            response_model=PackagesBilling,
            path=f"{billing_path('orgs', org)}/packages",
            return_format=return_format,
        )

    def get_organization_shared_storage_billing(
        self, org: ORG, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> SharedStorageBilling | JSON | str | None:
        return self._perform_rest_request(
            action="Get organization shared storage billing",
            response_model=SharedStorageBilling,
            path=f"{billing_path('orgs', org)}/shared-storage",
            return_format=return_format,
        )

    def get_organization_advanced_security_committers(
        self,
        org: ORG,
        page: PAGE = None,
        per_page: PER_PAGE = None,
        return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT,
    ) -> AdvancedSecurityCommitters | JSON | str | None:
        """Get the GitHub Advanced Security active committers of an organization, per repository."""

        return self._perform_rest_request(
            action="Get organization advanced security committers",
            response_model=AdvancedSecurityCommitters,
            path=f"{billing_path('orgs', org)}/advanced-security",
            params={"page": page, "per_page": per_page},
            return_format=return_format,
        )

    def get_user_actions_billing(
        self, username: USERNAME, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> ActionsBilling | JSON | str | None:
        return self._perform_rest_request(
            action="Get user actions billing",
            response_model=ActionsBilling,
            path=f"{billing_path('users', username)}/actions",
            return_format=return_format,
        )

    def get_user_packages_billing(
        self, username: USERNAME, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> PackagesBilling | JSON | str | None:
        return self._perform_rest_request(
            action="Get user packages billing",
            response_model=PackagesBilling,
            path=f"{billing_path('users', username)}/packages",
            return_format=return_format,
        )

    def get_user_shared_storage_billing(
        self, username: USERNAME, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> SharedStorageBilling | JSON | str | None:
        return self._perform_rest_request(
            action="Get user shared storage billing",
            response_model=SharedStorageBilling,
            path=f"{billing_path('users', username)}/shared-storage",
            return_format=return_format,
        )
