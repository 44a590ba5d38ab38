"""AppCore — resource resolution and request dispatch for browser apps.

Serves a bootstrap page, delivers named resources from an ordered search
path (built-in first, then the application's), and dispatches RPC calls
to a table of business functions.

Basic usage::

    import logic
    from appcore import AppCore, AppConfig

    app = AppCore(AppConfig(user_dir="./app"), functions=logic)

    app.fetch_resource("index", compress=False)
    app.run(DispatchRequest("saveItem", ["sku-1", 3], RequestKind.RPC))

``app`` is also an ASGI callable.
"""

__version__ = "0.1.0"
__all__ = [
    "AppConfig",
    "AppCore",
    "AppCoreError",
    "ConfigurationError",
    "DispatchError",
    "DispatchRequest",
    "FrameOptions",
    "ProviderChain",
    "RequestDispatcher",
    "RequestKind",
    "ResourceResolver",
    "Response",
    "compress",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import appcore`` fast while providing a clean top-level API.
    """
    if name == "AppCore":
        from appcore.app import AppCore

        return AppCore

    if name in ("AppConfig", "FrameOptions"):
        from appcore import config as _config

        return getattr(_config, name)

    if name in ("DispatchRequest", "RequestDispatcher", "RequestKind"):
        from appcore import dispatch as _dispatch

        return getattr(_dispatch, name)

    if name in ("ProviderChain", "ResourceResolver"):
        from appcore import resolver as _resolver

        return getattr(_resolver, name)

    if name == "Response":
        from appcore.http.response import Response

        return Response

    if name == "compress":
        from appcore.compression import compress

        return compress

    if name in ("AppCoreError", "ConfigurationError", "DispatchError"):
        from appcore import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
