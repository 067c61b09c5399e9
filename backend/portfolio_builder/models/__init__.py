# Import every model so metadata is complete for create_all and migrations
from .user import User
from .portfolio import Portfolio
from .track import Track
from .gallery_item import GalleryItem
from .contact_message import ContactMessage
from .audit_log import AuditLog
