from collections import UserString
from urllib.parse import quote


class Name(UserString):
    def __init__(self, stream: str) -> None:
        if not stream:
            raise ValueError("Stream name can't be empty")
        super().__init__(stream)

    @property
    def path(self) -> str:
        return f"/streams/{quote(self.data, safe='')}"

    @property
    def first_page(self) -> str:
        return f"{self.path}/0/forward/1"
