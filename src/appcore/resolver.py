"""Unified resource resolver.

Resources are looked up through an ordered search path: the built-in
(system) provider first, then an optional user provider. The first
provider that produces content wins::

    chain = ProviderChain(DirectoryProvider("./app"))
    resolver = ResourceResolver(chain)

    resolver.fetch_resource("index")                  # gzip + base64 text
    resolver.fetch_resource("index", compress=False)  # raw text
    resolver.fetch_resource("missing")                # None (logged)

A miss is not an error at this layer. The caller decides what "not
found" means (an empty body, a 404, ...).

Thread safety:
    The search path is a tuple fixed in ``ProviderChain.__init__``.
    Concurrent ``fetch_resource`` calls are safe as long as the providers
    themselves are safe for concurrent reads.
"""

import logging
import traceback
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from appcore.compression import compress as compress_source
from appcore.errors import ConfigurationError
from appcore.providers.filesystem import system_provider
from appcore.providers.protocol import ResourceProvider

logger = logging.getLogger("appcore.resolver")

SYSTEM_ID = "System (Lib)"
USER_ID = "User (Stage2)"


@dataclass(frozen=True, slots=True)
class ProviderEntry:
    """A provider tagged with the label used in miss diagnostics."""

    id: str
    provider: ResourceProvider


class ProviderChain:
    """Write-once search path of resource providers.

    The system provider is always first. A user provider, when given, is
    validated here and appended. There is no way to add, remove, or
    reorder providers afterwards.
    """

    __slots__ = ("_search_path",)

    def __init__(
        self,
        user_provider: object | None = None,
        *,
        system: ResourceProvider | None = None,
    ) -> None:
        entries = [ProviderEntry(SYSTEM_ID, system or system_provider())]

        if user_provider is not None:
            if not callable(getattr(user_provider, "create_template", None)):
                msg = (
                    "User provider must have a 'create_template' method, "
                    f"got {type(user_provider).__name__}"
                )
                raise ConfigurationError(msg)
            entries.append(ProviderEntry(USER_ID, user_provider))  # type: ignore[arg-type]

        self._search_path: tuple[ProviderEntry, ...] = tuple(entries)

    @property
    def search_path(self) -> tuple[ProviderEntry, ...]:
        """Providers in search order."""
        return self._search_path

    def __len__(self) -> int:
        return len(self._search_path)

    def __iter__(self) -> Iterator[ProviderEntry]:
        return iter(self._search_path)


class ResourceResolver:
    """Resolve resource names against a ``ProviderChain``."""

    __slots__ = ("_chain", "_compress")

    def __init__(
        self,
        chain: ProviderChain,
        *,
        compressor: Callable[[str], str] = compress_source,
    ) -> None:
        self._chain = chain
        self._compress = compressor

    @property
    def chain(self) -> ProviderChain:
        return self._chain

    def fetch_resource(self, file_name: str, compress: bool = True) -> str | None:
        """Return the content of *file_name* from the first provider that has it.

        Args:
            file_name: Resource name as understood by the providers.
            compress: Return gzip + base64 text instead of the raw content.

        Returns:
            The (optionally compressed) content, or ``None`` when every
            provider failed. A provider whose content cannot be compressed
            counts as failed. All failures are logged together in that case.
        """
        errors: list[str] = []

        for entry in self._chain.search_path:
            try:
                content = entry.provider.create_template(file_name).get_raw_content()
                return self._compress(content) if compress else content
            except Exception as exc:
                trace = "".join(traceback.format_exception(exc)).rstrip()
                errors.append(f"[{entry.id}]{exc}\n{trace}")

        logger.warning("%s\n%s", file_name, "\n".join(errors))
        return None
