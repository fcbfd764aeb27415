import reflex as rx


class ReleaseInfo(rx.Model, table=True):
    """Repository-wide metadata emitted in the ``Release`` file."""

    __tablename__ = "vapas_release"

    origin: str
    label: str
    suite: str
    version: str
    codename: str
    # comma-joined, stored exactly as they should appear in Release
    architectures: str
    components: str
    description: str
