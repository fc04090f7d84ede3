import logging
from flask import Flask
from flask_cors import CORS

from .config import Config
from .errors import register_error_handlers
from .models import db
from .seed import seed_defaults
from .storage import Storage

logger = logging.getLogger(__name__)


def create_app(config_class=Config, rng=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Configure logging
    logging.basicConfig(level=app.config["LOG_LEVEL"])

    CORS(app, resources={r"/api/*": {
        "origins": app.config["FRONTEND_URL"],
        "methods": ["GET", "POST", "PUT", "PATCH", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"]
    }})
    db.init_app(app)

    storage = Storage(
        recent_window=app.config["RECENT_WINDOW"],
        electricity_unit=app.config["DEFAULT_ELECTRICITY_UNIT"],
        water_unit=app.config["DEFAULT_WATER_UNIT"],
        rng=rng
    )
    app.extensions["storage"] = storage

    register_error_handlers(app)

    from .routes import usage, tips, badges, settings, dashboard
    for module in (usage, tips, badges, settings, dashboard):
        app.register_blueprint(module.bp)

    # Create database tables and load seed data
    with app.app_context():
        db.create_all()
        seed_defaults(app.config["DEFAULT_USER_ID"], storage.rng,
                      sample_entries=app.config["SEED_SAMPLE_ENTRIES"])

    logger.debug(f"App created with {config_class.__name__}")
    return app
