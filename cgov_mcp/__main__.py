"""Entry point: `cgov-mcp` or `python -m cgov_mcp`.

TRANSPORT_MODE selects the transport: `http` (default) or `stdio`.
"""

import asyncio
import contextlib
import logging
import signal
import sys

from .config import Settings, get_settings
from .db import DatabasePool
from .engine.dispatch import create_dispatcher
from .logging_config import configure_logging
from .models import TransportMode

logger = logging.getLogger(__name__)


def run_http(settings: Settings, pool: DatabasePool) -> None:
    """Run the HTTP server with uvicorn.

    uvicorn turns SIGINT/SIGTERM into lifespan shutdown, which closes the pool.
    """
    import uvicorn

    from .server import create_app

    uvicorn.run(
        create_app(settings, pool),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


async def serve_stdio(settings: Settings, pool: DatabasePool) -> None:
    """Serve over stdio until EOF or SIGTERM, then close the pool."""
    from .stdio import run_stdio

    task = asyncio.create_task(run_stdio(create_dispatcher(settings, pool)))
    loop = asyncio.get_running_loop()
    # Not available on every platform (Windows)
    with contextlib.suppress(NotImplementedError):
        loop.add_signal_handler(signal.SIGTERM, task.cancel)

    try:
        await task
    except asyncio.CancelledError:
        logger.info("Shutdown requested")
    finally:
        await pool.close()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        mode = TransportMode(settings.transport_mode.lower())
    except ValueError:
        logger.error(f"Unsupported TRANSPORT_MODE: {settings.transport_mode}")
        sys.exit(1)

    pool = DatabasePool.from_settings(settings)
    try:
        if mode is TransportMode.STDIO:
            asyncio.run(serve_stdio(settings, pool))
        else:
            run_http(settings, pool)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
