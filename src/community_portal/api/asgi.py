"""ASGI entrypoint serving the community portal with environment settings."""

from community_portal.api.app import create_app
from community_portal.containers import build_container

app = create_app(build_container())
