# art_portfolio/services/artwork_service.py
from flask import current_app

from ..errors import PortfolioError
from ..models import db, Artwork


class ArtworkRepository:
    """Storage seam for artworks. Routes never touch it directly, only ArtworkService does."""

    def list(self):
        raise NotImplementedError

    def add(self, fields):
        raise NotImplementedError

    def get(self, artwork_id):
        raise NotImplementedError

    def update(self, artwork_id, fields):
        raise NotImplementedError

    def delete(self, artwork_id):
        raise NotImplementedError


class SQLAlchemyArtworkRepository(ArtworkRepository):

    def list(self):
        return Artwork.query.order_by(Artwork.created_at.desc(), Artwork.id.desc()).all()

    def add(self, fields):
        artwork = Artwork(**fields)
        db.session.add(artwork)
        db.session.commit()
        return artwork

    def get(self, artwork_id):
        return db.session.get(Artwork, artwork_id)

    def update(self, artwork_id, fields):
        artwork = self.get(artwork_id)
        if artwork is None:
            return None
        for key, value in fields.items():
            setattr(artwork, key, value)
        db.session.commit()
        return artwork

    def delete(self, artwork_id):
        artwork = self.get(artwork_id)
        if artwork is None:
            return False
        db.session.delete(artwork)
        db.session.commit()
        return True


class ArtworkService:
    """
    The list/create/read/update/delete operations behind the /artwork pages.

    Args:
        repository (ArtworkRepository): Where artworks are stored. Defaults to
            the SQLAlchemy-backed repository.
    """

    def __init__(self, repository=None):
        self.repository = repository or SQLAlchemyArtworkRepository()

    @staticmethod
    def _editable(fields):
        return {key: fields[key] for key in Artwork.EDITABLE_FIELDS if key in fields}

    def list_artworks(self):
        return self.repository.list()

    def create_artwork(self, fields):
        artwork = self.repository.add(self._editable(fields))
        current_app.logger.info(f"Artwork {artwork.id} created: {artwork.title}")
        return artwork

    def get_artwork(self, artwork_id):
        """
        Raises:
            PortfolioError: 404 when no artwork has this id.
        """
        artwork = self.repository.get(artwork_id)
        if artwork is None:
            raise PortfolioError('Artwork not found', 404)
        return artwork

    def update_artwork(self, artwork_id, fields):
        artwork = self.repository.update(artwork_id, self._editable(fields))
        if artwork is None:
            raise PortfolioError('Artwork not found', 404)
        current_app.logger.info(f"Artwork {artwork_id} updated")
        return artwork

    def delete_artwork(self, artwork_id):
        if not self.repository.delete(artwork_id):
            raise PortfolioError('Artwork not found', 404)
        current_app.logger.info(f"Artwork {artwork_id} deleted")
