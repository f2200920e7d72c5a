from typing import ClassVar

from pydantic import ConfigDict, RootModel


class Emojis(RootModel[dict[str, str]]):
    """Emoji names mapped to the URL of their image."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def __getitem__(self, name: str) -> str:
        return self.root[name]

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def __len__(self) -> int:
        return len(self.root)

    def names(self) -> list[str]:
        return list(self.root)
