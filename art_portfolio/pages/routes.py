# art_portfolio/pages/routes.py
from flask import Blueprint, render_template

pages_bp = Blueprint('pages', __name__)


@pages_bp.route('/')
def home():
    return render_template('home.html')


@pages_bp.route('/about')
def about():
    return render_template('about.html')


@pages_bp.route('/events')
def events():
    return render_template('events.html')


@pages_bp.route('/press')
def press():
    return render_template('press.html')
