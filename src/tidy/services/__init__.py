from .duplicate_service import DuplicateService

__all__ = ["DuplicateService"]
