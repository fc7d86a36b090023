"""fortune2 HTTP API (Flask)."""

from fortune2.web.app import create_app

__all__ = ["create_app"]
