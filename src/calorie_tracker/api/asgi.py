"""ASGI entrypoint for the calorie tracker API."""

from calorie_tracker.api.app import create_app
from calorie_tracker.config import Settings
from calorie_tracker.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
