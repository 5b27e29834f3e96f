from typing import Protocol

from getres_lens.models import Annotation, StatusPayload


class HostSink(Protocol):
    def set_annotations(self, annotations: list[Annotation]) -> None: ...

    def set_status(self, status: StatusPayload) -> None: ...

    def notify(self, message: str, level: str = "info") -> None: ...
