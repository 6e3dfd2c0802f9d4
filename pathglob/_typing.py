from typing import NamedTuple


class DirEntry(NamedTuple):
    name: str
    is_dir: bool

    @property
    def hidden(self) -> bool:
        return self.name.startswith(".")
