import logging
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from greenpath.models import db
from greenpath.config import Config
from .routes.auth import auth_bp
from .routes.rides import rides_bp
from .routes.eco import eco_bp


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error"}), 500


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    db.init_app(app)
    with app.app_context():
        db.create_all()

    CORS(app, origins=app.config["CORS_ORIGINS"])

    # The browser client calls everything under /api
    for blueprint in (auth_bp, rides_bp, eco_bp):
        app.register_blueprint(blueprint)
        app.register_blueprint(blueprint, url_prefix='/api', name=f"api_{blueprint.name}")

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    register_error_handlers(app)
    return app
