"""Server startup.

Starts a pounce ASGI server with the live AppCore object. Requires the
``server`` extra (``pip install appcore[server]``).
"""


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    log_level: str = "info",
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given AppCore.

    Args:
        app: ASGI callable (AppCore instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
        log_level: Server log level (debug, info, warning, error).
        app_path: Optional ``"module:attribute"`` import string, so pounce
            can reimport the app on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=reload, log_level=log_level)
    server = Server(config, app, app_path=app_path)
    server.run()
