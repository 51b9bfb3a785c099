from flask import Flask

from keeplater.api import api_bp
from keeplater.config import Config
from keeplater.errors import register_error_handlers
from keeplater.extensions import db, migrate
from keeplater.models import Entry
from keeplater.services.security import JWKS_EXTENSION_KEY, create_jwks_client
from keeplater.web import web_bp


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    migrate.init_app(app, db)
    app.extensions[JWKS_EXTENSION_KEY] = create_jwks_client(app.config)

    app.register_blueprint(web_bp)
    app.register_blueprint(api_bp)
    register_error_handlers(app)

    @app.cli.command("init-db")
    def init_db_command():
        db.create_all()
        print("Initialized KeepLater database.")

    @app.cli.command("truncate-db")
    def truncate_db_command():
        deleted = db.session.query(Entry).delete()
        db.session.commit()
        print(f"Truncated entries ({deleted} rows).")

    @app.cli.command("drop-db")
    def drop_db_command():
        db.drop_all()
        print("Dropped KeepLater tables.")

    @app.context_processor
    def inject_globals():
        return {"app_name": "KeepLater"}

    with app.app_context():
        db.create_all()

    return app
