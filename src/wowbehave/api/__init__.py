"""HTTP request surface -- FastAPI routes over TeammateService."""

from wowbehave.api.app import create_app

__all__ = ["create_app"]
