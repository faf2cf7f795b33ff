import os
from datetime import datetime
from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv

# Load environment variables (override=True ensures .env values take precedence)
load_dotenv(override=True)

# Initialize extensions
db = SQLAlchemy()


def create_app(config_name=None, backend=None):
    """Application factory pattern.

    `backend` is the survey storage client. When it is not given, one is
    built from the SURVEY_BACKEND / SUPABASE_* settings.
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-me')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///dev.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Survey storage: 'supabase', 'database', or 'auto' (hosted table when configured)
    app.config['SURVEY_BACKEND'] = os.environ.get('SURVEY_BACKEND', 'auto')
    app.config['SUPABASE_URL'] = os.environ.get('SUPABASE_URL', '')
    app.config['SUPABASE_ANON_KEY'] = os.environ.get('SUPABASE_ANON_KEY', '')
    app.config['SURVEY_TABLE'] = os.environ.get('SURVEY_TABLE', 'surveys')
    app.config['SUPABASE_TIMEOUT'] = float(os.environ.get('SUPABASE_TIMEOUT', 10))

    # How long the "submitted" banner stays on screen
    app.config['SUCCESS_BANNER_SECONDS'] = int(os.environ.get('SUCCESS_BANNER_SECONDS', 5))

    if config_name == 'testing':
        app.config['TESTING'] = True
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///:memory:'
        app.config['SURVEY_BACKEND'] = 'database'

    # Fix for postgres:// vs postgresql:// (some providers use older postgres:// format)
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = app.config['SQLALCHEMY_DATABASE_URI'].replace(
            'postgres://', 'postgresql://', 1
        )

    # Initialize extensions with app
    db.init_app(app)

    # Import models so they are registered with SQLAlchemy
    from lifestyle_survey import models

    from lifestyle_survey.services.survey_backend import DatabaseBackend, build_backend
    if backend is None:
        backend = build_backend(app.config)
    app.extensions['survey_backend'] = backend

    # The database backend owns the surveys table; create it on first run
    if isinstance(backend, DatabaseBackend):
        with app.app_context():
            db.create_all()

    # Register blueprints
    from lifestyle_survey.routes.main import main_bp
    from lifestyle_survey.routes.survey import survey_bp
    from lifestyle_survey.routes.results import results_bp
    from lifestyle_survey.routes.api import api_bp
    app.register_blueprint(survey_bp)
    app.register_blueprint(results_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(main_bp)

    @app.cli.command('seed-surveys')
    def seed_surveys_command():
        """Insert sample survey responses."""
        from lifestyle_survey.seed_surveys import seed_surveys
        from lifestyle_survey.services.survey_backend import BackendError
        try:
            result = seed_surveys()
        except BackendError as e:
            current_app.logger.error(f"Seeding surveys failed: {e}")
            print(f"Seeding failed: {e}")
            return
        print(f"Added {result['added']} surveys ({result['total']} stored)")

    @app.context_processor
    def inject_now():
        return {'current_year': datetime.now().year}

    return app
