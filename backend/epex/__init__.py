from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
migrate = Migrate()


def create_app(config_class=Config, user_repository=None, payment_gateway=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    # Fails fast on missing signing secret
    from epex.settings import load_settings
    settings = load_settings(flask_app.config)

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS') or [])

    from epex.services.users import build_user_repository
    from epex.services.passwords import PasswordHasher
    from epex.services.tokens import TokenService
    from epex.services.payments import RazorpayGateway

    if payment_gateway is None and settings.payments_configured:
        payment_gateway = RazorpayGateway(
            settings.razorpay_key_id,
            settings.razorpay_key_secret,
            api_base=settings.razorpay_api_base,
            timeout=settings.razorpay_timeout,
        )
    if payment_gateway is None:
        flask_app.logger.warning("[config] payments disabled: Razorpay credentials are not configured")

    flask_app.extensions['epex.settings'] = settings
    flask_app.extensions['epex.users'] = user_repository or build_user_repository(settings.user_store)
    passwords = PasswordHasher()
    flask_app.extensions['epex.passwords'] = passwords
    # Compared against when a signin names an unknown email
    flask_app.extensions['epex.dummy_hash'] = passwords.hash('not-a-real-password')
    flask_app.extensions['epex.tokens'] = TokenService(settings.jwt_secret, settings.jwt_expires_in)
    flask_app.extensions['epex.payments'] = payment_gateway

    from epex.auth import register_auth_gate
    register_auth_gate(login_manager)

    # Import and register blueprints here
    from epex.api.auth import auth
    flask_app.register_blueprint(auth, url_prefix='/api/auth')

    from epex.api.users import users
    flask_app.register_blueprint(users, url_prefix='/api/user')

    from epex.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/game')

    from epex.api.payments import payments
    flask_app.register_blueprint(payments, url_prefix='/api/payments')

    register_error_handlers(flask_app)

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the database tables."""
        import epex.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app


def register_error_handlers(flask_app):
    from epex.errors import ApiError

    @flask_app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(error):
        messages = {404: 'Not found', 405: 'Method not allowed'}
        message = messages.get(error.code, error.name)
        return jsonify({'success': False, 'message': message}), error.code

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(error):
        flask_app.logger.exception(f"[unhandled] {type(error).__name__}")
        return jsonify({'success': False, 'message': 'Internal server error'}), 500
