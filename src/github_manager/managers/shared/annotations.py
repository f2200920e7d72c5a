from typing import Annotated

from pydantic import Field

from github_manager.clients.github import ReturnFormat

OWNER = Annotated[str, Field(description="The account owner of the repository.")]
REPO = Annotated[str, Field(description="The name of the repository without the .git extension.")]
ORG = Annotated[str, Field(description="The organization name.")]
USERNAME = Annotated[str, Field(description="The handle for the GitHub user account.")]

REPOSITORY_ID = Annotated[int, Field(description="The unique identifier of the repository.")]
ENVIRONMENT_NAME = Annotated[str, Field(description="The name of the environment.")]
SECRET_NAME = Annotated[str, Field(description="The name of the secret.")]
INVITATION_ID = Annotated[int, Field(description="The unique identifier of the invitation.")]

PAGE = Annotated[int | None, Field(description="The page number of the results to fetch.")]
PER_PAGE = Annotated[int | None, Field(description="The number of results per page (max 100).")]

ERROR_ON_NOT_FOUND = Annotated[bool, Field(description="Whether to raise an error instead of returning None if the resource is not found.")]

RETURN_FORMAT = Annotated[ReturnFormat, Field(description="The format to return the response in.")]
