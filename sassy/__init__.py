"""Sassy application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from flask import Flask

from sassy.config import config_by_name
from sassy.core.auth.session import SessionManager
from sassy.extensions import init_extensions


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Sassy Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    if env_name not in config_by_name:
        raise ValueError(f"Unknown APP_ENV {env_name!r}; expected one of {sorted(config_by_name)}")

    app = Flask(__name__, instance_path=str(instance_root), instance_relative_config=True)
    config_cls = config_by_name[env_name]
    app.config.from_object(config_cls)

    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    app.logger.setLevel(level)
    logging.getLogger("sassy").setLevel(level)

    # Uploads live under the project root unless configured absolute
    uploads_path = Path(app.config.get("UPLOAD_FOLDER", "instance/uploads"))
    if not uploads_path.is_absolute():
        uploads_path = project_root / uploads_path
    uploads_path.mkdir(parents=True, exist_ok=True)
    app.config["UPLOAD_FOLDER"] = str(uploads_path)

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if db_uri.startswith("sqlite:///") and not db_uri.startswith("sqlite:////"):
        abs_path = project_root / db_uri.replace("sqlite:///", "", 1)
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{abs_path}"

    # Fails fast when the cookie secret is missing outside development.
    SessionManager.from_config(app.config).init_app(app)

    init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    from sassy.scripts.seed_users import register_commands

    register_commands(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from sassy.core.admin.controllers import admin_api_bp
    from sassy.core.auth.controllers import auth_bp  # local import to avoid circulars
    from sassy.core.users.controllers import user_api_bp
    from sassy.domains.catalog.controllers.product_api import product_api_bp
    from sassy.domains.media.controllers.media_api import media_api_bp, media_files_bp, upload_api_bp
    from sassy.domains.storefront.controllers import storefront_api_bp
    from sassy.domains.team.controllers import team_api_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(product_api_bp, url_prefix="/api/products")
    app.register_blueprint(team_api_bp, url_prefix="/api/team-members")
    app.register_blueprint(storefront_api_bp, url_prefix="/api")

    app.register_blueprint(admin_api_bp, url_prefix="/api/admin")
    app.register_blueprint(user_api_bp, url_prefix="/api/admin/users")
    app.register_blueprint(media_api_bp, url_prefix="/api/admin/media")
    app.register_blueprint(upload_api_bp, url_prefix="/api/admin/upload")

    media_prefix = app.config.get("MEDIA_PUBLIC_BASE_URL", "/media")
    if media_prefix.startswith("/"):
        app.register_blueprint(media_files_bp, url_prefix=media_prefix.rstrip("/"))


def _register_error_handlers(app: Flask) -> None:
    """Basic JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
