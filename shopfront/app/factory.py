from __future__ import annotations

import logging

from flask import Flask, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from shopfront.app.config import Config
from shopfront.app.rendering import TemplateRenderer, init_renderer
from shopfront.app.request_context import init_request_id, log_request
from shopfront.app.routes import ROUTES, pages_bp, render_fallback, templates_for


def create_app(
    config_object: type[Config] = Config,
    renderer: TemplateRenderer | None = None,
) -> Flask:
    app = Flask(__name__, template_folder=config_object.TEMPLATE_FOLDER, static_folder=None)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    # A missing template fails here, never per request
    init_renderer(app, renderer).verify(templates_for(ROUTES))

    # Public assets live at the site root, e.g. /styles/site.css. Registered by
    # hand so that only GET/HEAD match; anything else reaches the fallback.
    app.static_folder = config_object.PUBLIC_FOLDER
    app.add_url_rule(
        "/<path:filename>",
        endpoint="static",
        view_func=app.send_static_file,
        methods=["GET"],
        provide_automatic_options=False,
    )

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    app.after_request(log_request)

    app.register_blueprint(pages_bp)

    # Anything routing could not place: unknown path or unregistered method
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def fallback(err):
        app.logger.info("No route for %s %s", request.method, request.path)
        return render_fallback()

    app.logger.info("Registered %d routes", len(ROUTES))
    return app
