from os import getenv

import reflex as rx

DB_URL = getenv("DATABASE_URL", "sqlite:///vapas.db")

config = rx.Config(
    app_name="vapas",
    db_url=DB_URL,
    cors_allowed_origins=["*"],
)
