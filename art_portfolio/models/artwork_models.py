# art_portfolio/models/artwork_models.py
from .base import db, BaseModel


class Artwork(BaseModel):
    __tablename__ = 'artworks'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(150), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(255), nullable=True)
    price = db.Column(db.Float, nullable=False, default=0.0)

    EDITABLE_FIELDS = ('title', 'description', 'image_url', 'price')

    def to_dict(self):
        return {
            "id": self.id, "title": self.title, "description": self.description,
            "image_url": self.image_url, "price": self.price,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self): return f'<Artwork {self.title}>'
