# art_portfolio/run.py
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from . import create_app
from .models import db


def connect_database(app):
    """Creates missing tables and checks the connection once at startup."""
    with app.app_context():
        try:
            db.create_all()
            db.session.execute(text('SELECT 1'))
        except SQLAlchemyError as e:
            app.logger.error(f"Database connection error: {e}")
            raise
        app.logger.info("Database connected")


def main():
    app = create_app()
    connect_database(app)
    port = app.config['PORT']
    app.logger.info(f"Serving on port {port}")
    try:
        app.run(host='0.0.0.0', port=port, debug=app.debug, use_reloader=False)
    finally:
        with app.app_context():
            db.engine.dispose()


if __name__ == '__main__':
    main()
