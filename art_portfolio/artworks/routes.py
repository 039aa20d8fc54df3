# art_portfolio/artworks/routes.py
from flask import Blueprint, current_app, flash, redirect, render_template, url_for
from flask_login import login_required

from ..forms import ArtworkForm, validate_artwork

artworks_bp = Blueprint('artworks', __name__, url_prefix='/artwork')


def _service():
    return current_app.artwork_service


@artworks_bp.route('', methods=['GET'])
def index():
    artworks = _service().list_artworks()
    return render_template('artwork/index.html', artworks=artworks)


@artworks_bp.route('/new', methods=['GET'])
@login_required
def new():
    return render_template('artwork/new.html', form=ArtworkForm())


@artworks_bp.route('', methods=['POST'])
@login_required
def create():
    fields = validate_artwork(ArtworkForm())
    artwork = _service().create_artwork(fields)
    flash('Successfully added a new artwork!', 'success')
    return redirect(url_for('artworks.show', artwork_id=artwork.id))


@artworks_bp.route('/<int:artwork_id>', methods=['GET'])
def show(artwork_id):
    artwork = _service().get_artwork(artwork_id)
    return render_template('artwork/show.html', artwork=artwork)


@artworks_bp.route('/<int:artwork_id>/edit', methods=['GET'])
@login_required
def edit(artwork_id):
    artwork = _service().get_artwork(artwork_id)
    return render_template('artwork/edit.html', artwork=artwork, form=ArtworkForm(obj=artwork))


@artworks_bp.route('/<int:artwork_id>', methods=['PUT', 'PATCH'])
@login_required
def update(artwork_id):
    fields = validate_artwork(ArtworkForm())
    artwork = _service().update_artwork(artwork_id, fields)
    flash('Successfully updated artwork!', 'success')
    return redirect(url_for('artworks.show', artwork_id=artwork.id))


@artworks_bp.route('/<int:artwork_id>', methods=['DELETE'])
@login_required
def delete(artwork_id):
    _service().delete_artwork(artwork_id)
    flash('Successfully deleted artwork', 'success')
    return redirect(url_for('artworks.index'))
