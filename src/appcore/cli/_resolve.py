"""App import resolution — resolves ``"module:attribute"`` strings to AppCore instances."""

import importlib

from appcore.app import AppCore


def resolve_app(import_string: str) -> AppCore:
    """Resolve an import string to an AppCore instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    Supports factory functions: if the resolved object is callable and
    not an AppCore instance, it will be called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an ``AppCore`` or factory.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, AppCore):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, AppCore):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not an appcore.AppCore instance"
        raise TypeError(msg)

    return obj
