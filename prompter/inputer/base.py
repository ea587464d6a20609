from typing import Protocol, runtime_checkable


@runtime_checkable
class BaseInputer(Protocol):
    def read_line(self) -> str: ...

    def read_password(self) -> str: ...
