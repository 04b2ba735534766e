"""Top-level FastAPI entrypoint for ASGI servers."""

from quote_central.apps.api.app import create_app

app = create_app()
