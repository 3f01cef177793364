"""Pageforge Landing Page Designer - NiceGUI entry point."""

import logging

from nicegui import app, ui

from pageforge.app import create_api_app
from pageforge.api import preview_router
from pageforge.config import settings
from pageforge.designer import LandingPageDesigner
from pageforge.services import close_services

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Mount API routes
api_app = create_api_app()
app.mount("/api", api_app)

# Public landing pages
app.include_router(preview_router)

app.on_shutdown(close_services)


@ui.page("/")
async def index(user: str = None):
    """Designer page.

    Args:
        user: Artist whose albums are listed (?user=<id>)
    """
    designer = LandingPageDesigner(user_id=user)
    await designer.build()


def main():
    """Run the application."""
    import argparse

    parser = argparse.ArgumentParser(description="Pageforge Landing Page Designer")
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help=f"HTTP port (default: {settings.PORT}, env: PAGEFORGE_PORT)"
    )
    parser.add_argument(
        "--host", "-H",
        default=None,
        help=f"Host to bind to (default: {settings.HOST}, env: PAGEFORGE_HOST)"
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload"
    )

    args = parser.parse_args()

    # Use CLI args > env vars > defaults (via settings)
    port = args.port or settings.PORT
    host = args.host or settings.HOST

    logger.info(f"Starting HTTP server on {host}:{port}")

    ui.run(
        host=host,
        port=port,
        title="Pageforge",
        reload=not args.no_reload,
        show=False,
        uvicorn_reload_includes="*.py,*.html,*.css",
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
