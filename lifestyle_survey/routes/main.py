from flask import Blueprint, redirect, url_for

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    """Health check endpoint."""
    return {'status': 'healthy', 'app': 'Lifestyle Survey'}


@main_bp.route('/<path:path>')
def fallback(path):
    """Unknown pages go back to the survey form."""
    return redirect(url_for('survey.index'))
