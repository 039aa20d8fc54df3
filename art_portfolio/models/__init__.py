from .base import db, BaseModel, utcnow
from .user_models import User
from .artwork_models import Artwork
from .session_models import SessionRecord
