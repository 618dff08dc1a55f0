"""
Server entry point - Serves a Router with uvicorn.
"""

import logging

from .asgi import ASGIAdapter
from .router import Router

logger = logging.getLogger("autoroute.server")


def run(
    router: Router,
    host: str = "127.0.0.1",
    port: int = 8000,
    log_level: str = "info",
) -> None:
    """
    Serve ``router`` until interrupted.

    Controllers must already be attached; the route table is not
    modified once requests are being served.
    """
    import uvicorn

    app = ASGIAdapter(router)
    logger.info(f"Starting uvicorn server on {host}:{port} ({len(router.routes)} routes)")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=log_level,
    )
