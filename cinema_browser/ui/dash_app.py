from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash
from flask import send_from_directory

from cinema_browser.builders import super_builder
from cinema_browser.builders.utils import ASSET_ROUTE
from cinema_browser.config.settings import AppSettings
from cinema_browser.core.database import Database
from cinema_browser.loaders import super_loader
from cinema_browser.loaders.io import is_remote
from cinema_browser.ui.callbacks import register_display_callbacks
from cinema_browser.ui.config import AppConfig
from cinema_browser.ui.layout import build_layout

logger = logging.getLogger(__name__)


def _serve_database_files(app: Dash, directory: str) -> None:
    """Expose a local database directory so image structures can reference its files."""
    if is_remote(directory):
        return

    root = Path(directory or ".").resolve()

    @app.server.route(f"{ASSET_ROUTE}/<path:filename>")
    def cinema_file(filename: str):
        return send_from_directory(root, filename)


def create_dash_app(
    spec_url: Optional[str] = None,
    settings: Optional[AppSettings] = None,
    database: Optional[Database] = None,
) -> Dash:
    settings = settings or AppSettings.from_env()

    # 1) Load the database and plug in the default loader/builder
    if database is None:
        database = Database.load(
            spec_url or settings.spec_url,
            loader=super_loader,
            builders=super_builder,
        )

    # 2) Activate every display: load sources, build structures, run the first intersection
    database.activate_all()

    ctx = AppConfig(
        database=database,
        settings=settings,
        ui_title=str(database.info.get("name") or "Cinema Browser"),
    )
    ctx.validate()

    app = Dash(__name__, external_stylesheets=[dbc.themes.FLATLY])
    app.title = ctx.ui_title
    app.layout = build_layout(ctx)

    _serve_database_files(app, database.directory)
    register_display_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"n_displays": len(database.displays), "directory": database.directory},
    )
    return app
