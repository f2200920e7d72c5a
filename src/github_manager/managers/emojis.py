import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import httpx

from github_manager.clients.github import GitHubManager, ReturnFormat
from github_manager.managers.shared.annotations import RETURN_FORMAT
from github_manager.models.emojis import Emojis

DEFAULT_EMOJI_SUFFIX = ".png"


def normalize_suffix(suffix: str) -> str:
    return suffix if suffix.startswith(".") else f".{suffix}"


class EmojisManager(GitHubManager):
    """The emojis available in GitHub markdown."""

    def get_emojis(
        self, names: Iterable[str] | None = None, return_format: RETURN_FORMAT = ReturnFormat.LIBRARY_OBJECT
    ) -> Emojis | dict[str, Any] | str | None:
        """Get the emojis available for use on GitHub.

        Args:
            names: Only return these emojis; names are matched case-insensitively.
            return_format: The format to return the response in.
        """

        emojis: dict[str, str] | None = self._perform_rest_request(
            action="Get emojis",
            response_model=dict[str, str],
            path="/emojis",
            return_format=ReturnFormat.JSON,
        )

        if emojis is None:
            return None

        if names is not None:
            wanted: set[str] = {name.lower() for name in names}
            emojis = {name: url for name, url in emojis.items() if name in wanted}

        if return_format is ReturnFormat.STRING:
            return json.dumps(emojis)

        if return_format is ReturnFormat.JSON:
            return emojis

        return Emojis(root=emojis)

    def download_emojis(self, names: Iterable[str], directory: Path | str, suffix: str = DEFAULT_EMOJI_SUFFIX) -> list[Path]:
        """Download the images of the given emojis into a directory.

        Each image is written as `<name><suffix>`. Unknown names and failed downloads are logged and skipped.

        Returns:
            The paths of the files that were written.
        """

        names = [name.lower() for name in names]
        suffix = normalize_suffix(suffix)

        emojis = self.get_emojis(names=names)

        if emojis is None:
            return []

        target_directory = Path(directory)
        target_directory.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []

        for name in names:
            if name not in emojis:
                self.logger.warning(f"Emoji {name} does not exist, skipping")
                continue

            if image := self._download_image(name=name, url=emojis[name]):
                target = target_directory / f"{name}{suffix}"
                _ = target.write_bytes(image)
                written.append(target)

        return written

    def _download_image(self, name: str, url: str) -> bytes | None:
        _, _, error_logger = self._get_loggers()

        # Bare request: the default Authorization header must not reach the image host.
        try:
            response = self.http_client.send(httpx.Request("GET", url))
        except httpx.HTTPError as e:
            error_logger(f"Error downloading emoji {name} from {url}: {e}")
            return None

        if response.is_error:
            error_logger(f"Downloading emoji {name} from {url} failed with status {response.status_code}")
            return None

        return response.content
