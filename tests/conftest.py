from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from vapas.api import create_api
from vapas.config import Settings
from vapas.gateway import StorageGateway
from vapas.models import FeaturedBanner, PackageInfo, ReleaseInfo

BASE_URL = "https://repo.example"


def make_release(**overrides) -> ReleaseInfo:
    values = dict(
        origin="Vapas",
        label="Vapas",
        suite="stable",
        version="1.0",
        codename="ios",
        architectures="iphoneos-arm",
        components="main",
        description="The Vapas repository",
    )
    values.update(overrides)
    return ReleaseInfo(**values)


def make_package(**overrides) -> PackageInfo:
    values = dict(
        package_id="com.foo.bar",
        name="foobar",
        version="1.0",
        section="Tweaks",
        developer_name="Foo Dev",
        depends="",
        price=0,
        version_size=1024,
        version_hash="abc123",
        short_description="Does foo things",
        icon="http://x/i.png",
        package_visible=True,
    )
    values.update(overrides)
    return PackageInfo(**values)


def make_banner(**overrides) -> FeaturedBanner:
    values = dict(
        url="https://repo.example/banners/foo.png",
        title="Foo",
        package="com.foo.bar",
        hide_shadow=False,
    )
    values.update(overrides)
    return FeaturedBanner(**values)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def add_rows(engine):
    def _add(*rows):
        with Session(engine) as session:
            session.add_all(rows)
            session.commit()

    return _add


@pytest.fixture
def gateway(engine) -> StorageGateway:
    return StorageGateway(engine)


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    (root / "icons").mkdir(parents=True)
    (root / "CydiaIcon.png").write_bytes(b"\x89PNG\r\n\x1a\ncydia")
    (root / "footerIcon.png").write_bytes(b"\x89PNG\r\n\x1a\nfooter")
    (root / "icons" / "Tweaks.png").write_bytes(b"\x89PNG\r\n\x1a\ntweaks")
    return root


@pytest.fixture
def settings(assets_dir: Path) -> Settings:
    return Settings(database_url="sqlite://", base_url=BASE_URL, assets_dir=assets_dir)


@pytest.fixture
def client(settings, gateway):
    with TestClient(create_api(settings, gateway)) as client:
        yield client
