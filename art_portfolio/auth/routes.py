# art_portfolio/auth/routes.py
from flask import Blueprint, current_app, flash, redirect, render_template, request, session, url_for
from flask_login import current_user, login_required, login_user, logout_user
from sqlalchemy.exc import IntegrityError

from .. import limiter
from ..forms import LoginForm, SignupForm, form_error_messages
from ..models import db, User
from ..utils import is_safe_redirect_target

auth_bp = Blueprint('auth', __name__)


def _redirect_after_login():
    return_to = request.args.get('next')
    if is_safe_redirect_target(return_to):
        return redirect(return_to)
    return redirect(url_for('artworks.index'))


def _start_user_session(user):
    # a fresh id on every login, so a session never carries over between users
    session.regenerate()
    login_user(user)


@auth_bp.route('/login', methods=['GET'])
def login():
    return render_template('users/login.html', form=LoginForm(), next=request.args.get('next'))


@auth_bp.route('/login', methods=['POST'])
@limiter.limit(lambda: current_app.config.get('AUTH_RATELIMITS', "20 per minute"))
def login_post():
    form = LoginForm()
    user = User.authenticate(form.username.data, form.password.data) if form.validate() else None
    if user is None:
        current_app.logger.warning(f"Failed login attempt for username: {form.username.data}")
        flash('Password or username is incorrect', 'error')
        return redirect(url_for('auth.login', next=request.args.get('next')))

    _start_user_session(user)
    current_app.logger.info(f"User logged in successfully: {user.username}")
    flash('Welcome back!', 'success')
    return _redirect_after_login()


@auth_bp.route('/signup', methods=['GET'])
def signup():
    return render_template('users/signup.html', form=SignupForm())


@auth_bp.route('/signup', methods=['POST'])
@limiter.limit(lambda: current_app.config.get('AUTH_RATELIMITS', "20 per minute"))
def signup_post():
    form = SignupForm()
    if not form.validate():
        flash(', '.join(form_error_messages(form)), 'error')
        return redirect(url_for('auth.signup'))

    username, email = form.username.data, form.email.data
    if User.query.filter((User.username == username) | (User.email == email)).first():
        flash('A user with the given username or email is already registered', 'error')
        return redirect(url_for('auth.signup'))

    try:
        user = User.register(username, email, form.password.data)
    except IntegrityError:
        db.session.rollback()
        flash('A user with the given username or email is already registered', 'error')
        return redirect(url_for('auth.signup'))

    _start_user_session(user)
    current_app.logger.info(f"User registered: {user.username}")
    flash('Welcome to the portfolio!', 'success')
    return redirect(url_for('artworks.index'))


@auth_bp.route('/logout', methods=['GET'])
def logout_page():
    # FIXME: renders home without signing the user out. POST /logout does the real logout.
    return render_template('home.html')


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    username = current_user.username
    logout_user()
    current_app.logger.info(f"User logged out: {username}")
    flash('Goodbye!', 'success')
    return redirect(url_for('pages.home'))
