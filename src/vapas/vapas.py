"""vapas: Cydia/Sileo package repository index server."""

import logging

import reflex as rx

from vapas.api import create_api
from vapas.config import Settings

logger = logging.getLogger(__name__)

# fail fast: a missing DATABASE_URL must stop the server before it binds
settings = Settings.from_env()
logging.getLogger().setLevel(settings.log_level)


def index() -> rx.Component:
    """Landing page pointing users at the repository URL."""
    repo_url = settings.base_url or "this server's address"
    return rx.container(
        rx.heading("vapas", size="9", margin_bottom="1em"),
        rx.text(
            f"Add {repo_url} as a source in Cydia, Sileo or Zebra to browse packages.",
            color="gray",
            margin_bottom="2em",
        ),
        rx.link("Release", href="/Release"),
        max_width="1200px",
        padding="2em",
    )


app = rx.App(
    theme=rx.theme(appearance="dark", has_background=True, radius="full", accent_color="violet"),
    api_transformer=create_api(settings),
)
app.add_page(index, route="/", title="vapas")
