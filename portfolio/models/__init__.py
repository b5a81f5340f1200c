# models package for SQLModel models
from .user import User, Role  # noqa: F401  (import for metadata registration)
from .project import (  # noqa: F401
    Project,
    StatusFlag,
    CollabMode,
    AffiliationType,
    SourceCodeAvailability,
)
from .blog import BlogPost, Comment, BlogImage  # noqa: F401
from .gallery import GalleryItem, MediaType  # noqa: F401
from .contact import ContactMessage  # noqa: F401
