"""HTTP endpoints serving the repository index."""

import gzip
import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi import Path as PathParam
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response

from .assets import resolve_asset, resolve_icon
from .config import Settings
from .constants import CYDIA_ICON, FOOTER_ICON, ICON_NAME_PATTERN
from .db import create_db_engine
from .exceptions import AssetNotFound, ConfigError, StorageError
from .featured import serialize_featured
from .formatting import format_packages, format_release
from .gateway import StorageGateway

logger = logging.getLogger(__name__)

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> StorageGateway:
    return request.app.state.gateway


SettingsDep = Annotated[Settings, Depends(get_settings)]
GatewayDep = Annotated[StorageGateway, Depends(get_gateway)]


def _png_attachment(path: Path) -> FileResponse:
    # FileResponse sets Last-Modified and ETag from the file's stat
    return FileResponse(
        path,
        media_type="image/png",
        filename=path.name,
        content_disposition_type="attachment",
    )


@router.get("/Release", response_class=PlainTextResponse)
def release(gateway: GatewayDep) -> PlainTextResponse:
    return PlainTextResponse(format_release(gateway.fetch_releases()))


@router.get("/Packages")
def packages(settings: SettingsDep, gateway: GatewayDep) -> Response:
    base_url = settings.require_base_url()
    payload = format_packages(gateway.fetch_visible_packages(), base_url)
    return Response(
        content=gzip.compress(payload.encode("utf-8")),
        media_type="text/plain",
        headers={"Content-Encoding": "gzip"},
    )


@router.get("/CydiaIcon.png", response_class=FileResponse)
def cydia_icon(settings: SettingsDep) -> FileResponse:
    return _png_attachment(resolve_asset(settings.assets_dir, CYDIA_ICON))


@router.get("/footerIcon.png", response_class=FileResponse)
def footer_icon(settings: SettingsDep) -> FileResponse:
    return _png_attachment(resolve_asset(settings.assets_dir, FOOTER_ICON))


@router.get("/icons/{name}", response_class=FileResponse)
def default_icons(
    settings: SettingsDep,
    name: Annotated[str, PathParam(pattern=ICON_NAME_PATTERN)],
) -> FileResponse:
    return _png_attachment(resolve_icon(settings.assets_dir, name))


@router.get("/sileo-featured.json", response_class=JSONResponse)
def sileo_featured(gateway: GatewayDep) -> JSONResponse:
    return JSONResponse(serialize_featured(gateway.fetch_featured_banners()))


async def storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse("Service temporarily unavailable", status_code=503)


async def config_error_handler(request: Request, exc: ConfigError) -> PlainTextResponse:
    logger.error(f"{request.method} {request.url.path} misconfigured: {exc}")
    return PlainTextResponse("Server misconfigured", status_code=500)


async def asset_not_found_handler(request: Request, exc: AssetNotFound) -> PlainTextResponse:
    return PlainTextResponse("Not Found", status_code=404)


def create_api(settings: Settings, gateway: StorageGateway | None = None) -> FastAPI:
    """Build the FastAPI app serving the index endpoints.

    Args:
        settings: Loaded server settings.
        gateway: Storage gateway to read rows from. Defaults to one backed by a
            new pooled engine for ``settings.database_url``.
    """
    if gateway is None:
        gateway = StorageGateway(create_db_engine(settings))

    api = FastAPI(title="vapas", docs_url=None, redoc_url=None, openapi_url=None)
    api.state.settings = settings
    api.state.gateway = gateway
    api.include_router(router)
    api.add_exception_handler(StorageError, storage_error_handler)
    api.add_exception_handler(ConfigError, config_error_handler)
    api.add_exception_handler(AssetNotFound, asset_not_found_handler)
    return api
