"""Resource provider protocols.

A *provider* turns a resource name into a handle whose raw text can be
read. No base class required: anything with a callable
``create_template`` qualifies. The resolver checks the shape, not the
lineage::

    class DatabaseProvider:
        def create_template(self, file_name: str) -> TemplateHandle:
            row = db.fetch_one("SELECT body FROM pages WHERE name = ?", file_name)
            if row is None:
                raise LookupError(file_name)
            return StringHandle(file_name, row.body)

Providers signal a miss by raising. The resolver catches it and moves on
to the next provider in the search path.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TemplateHandle(Protocol):
    """A located resource whose raw text can be read."""

    def get_raw_content(self) -> str: ...


@runtime_checkable
class ResourceProvider(Protocol):
    """Anything that can locate a resource by file name."""

    def create_template(self, file_name: str) -> TemplateHandle: ...
