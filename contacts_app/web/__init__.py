# contacts_app/web/__init__.py
from flask import Flask, render_template
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES
from ..config import Config
from ..logging_config import setup_logging, register_access_log
from .api_client import ApiError, ContactsApiClient

def create_web_app(config_class=Config, contacts_api=None):
    """
    Builds the server-rendered front-end. ``contacts_api`` replaces the
    ContactsApiClient normally built from API_URL (tests hand in their own).
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app)
    register_access_log(app)

    if contacts_api is None:
        contacts_api = ContactsApiClient(
            app.config['API_URL'],
            timeout=app.config['API_TIMEOUT']
        )
    app.extensions['contacts_api'] = contacts_api

    def render_error(status_code, message):
        title = f"{status_code} {HTTP_STATUS_CODES.get(status_code, 'Error')}"
        return render_template('error.html', title=title, message=message), status_code

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return render_error(error.status_code, error.message)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return render_error(error.code, error.description)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception(f"Unhandled error: {error}")
        return render_error(500, "Something went wrong while rendering this page.")

    @app.context_processor
    def inject_helpers():
        return {'display_name': display_name}

    from .routes import bp as web_bp
    app.register_blueprint(web_bp)

    app.logger.info(f"Contacts web front-end initialized against {app.config['API_URL']}.")
    return app


def display_name(contact):
    """'First Last', or None when neither name is set."""
    parts = [contact.get('first'), contact.get('last')]
    return ' '.join(part for part in parts if part) or None
