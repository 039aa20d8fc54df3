from .artwork_service import ArtworkRepository, SQLAlchemyArtworkRepository, ArtworkService
