import logging
import os
import stat

from app.core.errors import StaticResourceForbidden, StaticResourceMissing

logger = logging.getLogger(__name__)

def resolve_static_path(root: str, request_path: str) -> str:
    """
    Map a URL path onto the static root.

    Containment is checked on the normalized path before the filesystem is
    touched; anything that escapes the root raises StaticResourceForbidden.
    """
    root_abs = os.path.abspath(root)
    relative = request_path.replace("\\", "/").lstrip("/")
    candidate = os.path.normpath(os.path.join(root_abs, relative))
    try:
        contained = os.path.commonpath([root_abs, candidate]) == root_abs
    except ValueError:
        contained = False
    if not contained:
        raise StaticResourceForbidden("access forbidden")
    return candidate

def check_static_file(root: str, request_path: str) -> str:
    """
    Returns the path of a readable regular file under root.
    Missing -> StaticResourceMissing; not a regular file or unreadable -> StaticResourceForbidden.
    """
    path = resolve_static_path(root, request_path)
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        raise StaticResourceMissing("Resource missing")
    if not stat.S_ISREG(st.st_mode):
        raise StaticResourceForbidden("access forbidden")
    try:
        with open(path, "rb"):
            pass
    except OSError as e:
        logger.warning(f"Cannot open {path}: {e}")
        raise StaticResourceForbidden("wrong file permission")
    return path
