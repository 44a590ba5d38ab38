"""In-memory resource provider."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StringHandle:
    """A resource whose content is already in memory."""

    name: str
    content: str

    def get_raw_content(self) -> str:
        return self.content


class MappingProvider:
    """Provider backed by a name -> content mapping.

    Useful for embedding a handful of generated resources, and for tests::

        provider = MappingProvider({"index.html": "<h1>Hello</h1>"})
    """

    __slots__ = ("_resources",)

    def __init__(self, resources: Mapping[str, str]) -> None:
        self._resources = dict(resources)

    def create_template(self, file_name: str) -> StringHandle:
        content = self._resources.get(file_name)
        if content is None:
            msg = f"No resource named {file_name!r}"
            raise FileNotFoundError(msg)
        return StringHandle(file_name, content)
