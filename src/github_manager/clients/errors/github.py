ExtraInfoType = dict[str, str | None]


def format_extra_info(extra_info: ExtraInfoType) -> str:
    return ", ".join(f"{key}: {value}" for key, value in extra_info.items() if value is not None)


class ClientError(Exception):
    """Base class of every error a manager raises.

    Unset entries of `extra_info` are left out of the message: `Something failed. (action: Get zen)`.
    """

    def __init__(self, message: str, extra_info: ExtraInfoType | None = None):
        details = format_extra_info(extra_info or {})
        super().__init__(f"{message} ({details})" if details else message)


class RequestError(ClientError):
    """A call to the GitHub API did not produce a usable response.

    `status_code` is the HTTP status GitHub answered with, or None when no response arrived at all
    (connection failures, timeouts) or the body could not be decoded.
    """

    status_code: int | None

    def __init__(
        self, action: str, message: str | None = None, status_code: int | None = None, extra_info: ExtraInfoType | None = None
    ):
        self.status_code = status_code
        super().__init__(
            message="The GitHub API request failed.",
            extra_info={
                "action": action,
                "message": message,
                "status_code": str(status_code) if status_code is not None else None,
                **(extra_info or {}),
            },
        )


class ResourceNotFoundError(RequestError):
    """GitHub answered 404 and the caller asked for that to be an error."""

    def __init__(self, action: str, resource: str | None = None):
        super().__init__(action=action, message="The resource could not be found.", status_code=404, extra_info={"resource": resource})


class ResponseParsingError(RequestError):
    """The response body could not be turned into the requested format."""

    def __init__(self, action: str, message: str | None = None):
        super().__init__(action=action, message=message)
