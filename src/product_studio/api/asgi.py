"""ASGI entrypoint for the product studio."""

from product_studio.api.app import create_app
from product_studio.containers import build_container

app = create_app(build_container())
