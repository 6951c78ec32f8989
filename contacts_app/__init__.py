# contacts_app/__init__.py
from flask import Flask, jsonify
from flask_cors import CORS
from flask_pymongo import PyMongo
from werkzeug.exceptions import HTTPException
from .config import Config
from .exceptions import ContactsError
from .logging_config import setup_logging, register_access_log

mongo = PyMongo()

def create_app(config_class=Config, db=None):
    """
    Builds the REST API app. ``db`` lets callers hand in an already open
    database (tests pass a mongomock one); otherwise MONGO_URI is used.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app)
    register_access_log(app)

    # Pretty print JSON responses
    app.json.compact = False
    CORS(app, origins=app.config['CORS_ORIGINS'])

    if db is None:
        mongo.init_app(app)
        db = mongo.db

    # Stored per app; routes look it up through current_app
    from .services.contact_service import ContactService
    app.extensions['contact_service'] = ContactService(db)

    @app.errorhandler(ContactsError)
    def handle_contacts_error(error):
        if error.status_code >= 500:
            app.logger.error(f"{type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception(f"Unhandled error: {error}")
        return jsonify({"message": "Internal server error"}), 500

    # Register blueprints
    from .routes.contact_routes import bp as contacts_api_bp
    app.register_blueprint(contacts_api_bp)

    app.logger.info(f"Contacts API initialized ({app.config['APP_ENV']}).")
    return app
