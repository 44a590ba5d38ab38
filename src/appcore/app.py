"""AppCore application class.

Wires the pieces together: the provider search path, the resolver, the
dispatcher, and the kida environment. Everything is built once in
``__init__`` and never mutated afterwards.

Usage::

    import logic
    from appcore import AppCore, AppConfig

    app = AppCore(AppConfig(user_dir="./app", app_title="Inventory"), functions=logic)

    # Serve with any ASGI server, or:
    # appcore serve myapp:app

The host owns the collaborators: the user provider, the function table,
and (optionally) a custom kida environment are injected here rather than
looked up globally.
"""

from __future__ import annotations

from typing import Any

from kida import Environment

from appcore._internal.asgi import Receive, Scope, Send
from appcore.config import AppConfig
from appcore.dispatch import DispatchRequest, FunctionTable, RequestDispatcher
from appcore.errors import ConfigurationError
from appcore.providers.filesystem import DirectoryProvider
from appcore.providers.protocol import ResourceProvider
from appcore.resolver import ProviderChain, ResourceResolver
from appcore.server.handler import handle_request
from appcore.templating.bootstrap import HtmlOutput, render_bootstrap
from appcore.templating.integration import create_environment


class AppCore:
    """Resource resolution, bootstrap rendering, and request dispatch.

    Args:
        config: Application configuration.
        user_provider: Provider searched after the built-in resources.
            Takes precedence over ``config.user_dir``.
        functions: Function table used by ``run()`` and the ASGI adapter.
        kida_env: Pre-built kida environment (defaults to one built
            from ``config``).

    Raises:
        ConfigurationError: ``user_provider`` lacks ``create_template``, or
            ``config.user_dir`` is not a directory.
    """

    __slots__ = ("_dispatcher", "_kida_env", "_resolver", "config", "functions")

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        user_provider: object | None = None,
        functions: FunctionTable | None = None,
        kida_env: Environment | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self.functions: FunctionTable = functions if functions is not None else {}

        if user_provider is None and self.config.user_dir is not None:
            user_provider = _directory_provider(self.config.user_dir)

        self._resolver = ResourceResolver(ProviderChain(user_provider))
        self._dispatcher = RequestDispatcher(self._resolver)
        self._kida_env = kida_env if kida_env is not None else create_environment(self.config)

    @property
    def resolver(self) -> ResourceResolver:
        return self._resolver

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    @property
    def kida_env(self) -> Environment:
        return self._kida_env

    def fetch_resource(self, file_name: str, compress: bool = True) -> str | None:
        """Resolve *file_name* through the search path. See ``ResourceResolver``."""
        return self._resolver.fetch_resource(file_name, compress)

    def run(self, request: DispatchRequest, functions: FunctionTable | None = None) -> Any:
        """Dispatch *request* against *functions* (defaults to ``self.functions``)."""
        table = functions if functions is not None else self.functions
        return self._dispatcher.run(request, table)

    def render(self, page_name: str, config: dict[str, Any] | None = None) -> HtmlOutput:
        """Render the bootstrap page that loads *page_name*.

        *config* uses the ``version`` / ``initialData`` / ``appTitle`` /
        ``dependencies`` keys; when omitted the values from ``AppConfig``
        are used.
        """
        return render_bootstrap(
            self._kida_env,
            page_name,
            config if config is not None else self.config.bootstrap(),
            viewport=self.config.viewport,
            frame_options=self.config.frame_options,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point."""
        await handle_request(self, scope, receive, send)


def _directory_provider(directory: Any) -> ResourceProvider:
    provider = DirectoryProvider(directory)
    if not provider.directory.is_dir():
        msg = f"user_dir {str(directory)!r} is not a directory"
        raise ConfigurationError(msg)
    return provider
