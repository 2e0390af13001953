"""Local development server: ``python -m kpop_stylist``."""

from kpop_stylist.config import load_settings


def main() -> None:
    """Launch the uvicorn ASGI server on the configured host and port."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "kpop_stylist.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
