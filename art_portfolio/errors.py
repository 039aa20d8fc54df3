# art_portfolio/errors.py
from flask import render_template, request
from werkzeug.exceptions import HTTPException

from .models import db

DEFAULT_ERROR_MESSAGE = 'Oh no, something went wrong!'


class PortfolioError(Exception):
    """Application error carrying the HTTP status it should be rendered with."""

    def __init__(self, message=None, status_code=500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self):
        return f'<PortfolioError {self.status_code}: {self.message}>'


def _status_and_message(error):
    if isinstance(error, PortfolioError):
        return error.status_code or 500, error.message
    if isinstance(error, HTTPException):
        return error.code or 500, error.description
    return getattr(error, 'status_code', None) or 500, None


def register_error_handlers(app):

    @app.errorhandler(404)
    def page_not_found(error):
        return handle_error(PortfolioError('Page not found', 404))

    @app.errorhandler(Exception)
    def handle_error(error):
        status_code, message = _status_and_message(error)
        if not message:
            message = DEFAULT_ERROR_MESSAGE

        if status_code >= 500:
            db.session.rollback()
            app.logger.error(f"Unhandled error on {request.method} {request.path}: {error}", exc_info=error)
        else:
            app.logger.warning(f"{status_code} on {request.method} {request.path}: {message}")

        return render_template('error.html', status_code=status_code, message=message), status_code
