class TemplateLoadError(Exception):
    """Page template is missing or unreadable; the render is aborted."""

class StaticResourceMissing(Exception):
    """Requested static path does not exist."""

class StaticResourceForbidden(Exception):
    """Requested static path is outside the root, not a regular file, or unreadable."""
