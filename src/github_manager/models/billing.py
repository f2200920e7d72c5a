from pydantic import Field

from github_manager.clients.models.github import GitHubModel


class MinutesUsedBreakdown(GitHubModel):
    """Minutes used on each runner operating system."""

    ubuntu: int | None = Field(default=None, alias="UBUNTU", description="Total minutes used on Ubuntu runner machines.")
    macos: int | None = Field(default=None, alias="MACOS", description="Total minutes used on macOS runner machines.")
    windows: int | None = Field(default=None, alias="WINDOWS", description="Total minutes used on Windows runner machines.")
    total: int | None = Field(default=None, description="Total minutes used on all runner machines.")


class ActionsBilling(GitHubModel):
    """GitHub Actions usage for the current billing cycle."""

    total_minutes_used: int = Field(description="The sum of the free and paid GitHub Actions minutes used.")
    total_paid_minutes_used: float = Field(description="The total paid GitHub Actions minutes used.")
    included_minutes: int = Field(description="The amount of free GitHub Actions minutes available.")
    minutes_used_breakdown: MinutesUsedBreakdown = Field(
        default_factory=MinutesUsedBreakdown, description="Minutes used on each runner operating system."
    )


class PackagesBilling(GitHubModel):
    """GitHub Packages data transfer usage for the current billing cycle."""

    total_gigabytes_bandwidth_used: float = Field(description="The sum of the free and paid storage space (GB) for GitHub Packages.")
    total_paid_gigabytes_bandwidth_used: float = Field(description="The total paid storage space (GB) for GitHub Packages.")
    included_gigabytes_bandwidth: float = Field(description="The amount of free GitHub Packages storage space (GB).")


class SharedStorageBilling(GitHubModel):
    """Storage used by GitHub Actions artifacts and GitHub Packages."""

    days_left_in_billing_cycle: int = Field(description="The number of days left in the billing cycle.")
    estimated_paid_storage_for_month: float = Field(description="The estimated paid storage for the month.")
    estimated_storage_for_month: float = Field(description="The estimated storage for the month.")


class AdvancedSecurityCommitterBreakdown(GitHubModel):
    user_login: str = Field(description="The login of the committer.")
    last_pushed_date: str = Field(description="The date of the last push of the committer, i.e. '2021-11-03'.")


class AdvancedSecurityRepository(GitHubModel):
    name: str = Field(description="The full name of the repository.")
    advanced_security_committers: int = Field(description="The number of committers using GitHub Advanced Security in the repository.")
    advanced_security_committers_breakdown: list[AdvancedSecurityCommitterBreakdown] = Field(
        default_factory=list, description="The committers using GitHub Advanced Security in the repository."
    )


class AdvancedSecurityCommitters(GitHubModel):
    """GitHub Advanced Security active committers across the repositories of an organization."""

    total_advanced_security_committers: int | None = Field(default=None, description="The total number of active committers.")
    total_count: int | None = Field(default=None, description="The total number of repositories.")
    repositories: list[AdvancedSecurityRepository] = Field(default_factory=list, description="The repositories of this page.")
