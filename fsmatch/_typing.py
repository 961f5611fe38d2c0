from typing import Literal, TypedDict


class FSMValidation(TypedDict):
    valid: bool
    path: str
    kind: Literal["directory", "file"]
    message: str | None
