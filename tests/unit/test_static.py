import os

import pytest

from app.core.errors import StaticResourceForbidden, StaticResourceMissing
from app.files import static
from app.files.static import check_static_file, resolve_static_path

class TestResolveStaticPath:
    """Containment checks for static path resolution"""

    def test_resolves_inside_root(self, tmp_path):
        root = str(tmp_path)
        assert resolve_static_path(root, "/index.css") == os.path.join(root, "index.css")
        assert resolve_static_path(root, "css/../index.css") == os.path.join(root, "index.css")

    @pytest.mark.parametrize("path", [
        "../../etc/passwd",
        "/../secret.txt",
        "css/../../secret.txt",
        "..\\..\\etc\\passwd",
    ])
    def test_traversal_is_forbidden(self, tmp_path, path):
        root = tmp_path / "public"
        root.mkdir()

        with pytest.raises(StaticResourceForbidden):
            resolve_static_path(str(root), path)

    def test_sibling_with_common_prefix_is_forbidden(self, tmp_path):
        root = tmp_path / "public"
        root.mkdir()
        (tmp_path / "public-private").mkdir()

        with pytest.raises(StaticResourceForbidden):
            resolve_static_path(str(root), "../public-private/key")

class TestCheckStaticFile:
    """Unit tests for static resource checks"""

    def test_regular_file(self, site):
        path = check_static_file(str(site), "index.css")

        assert path == os.path.join(str(site), "index.css")

    def test_nested_file(self, site):
        assert check_static_file(str(site), "/css/site.css") == os.path.join(str(site), "css", "site.css")

    def test_missing_file(self, site):
        with pytest.raises(StaticResourceMissing):
            check_static_file(str(site), "missing.png")

    def test_directory_is_forbidden(self, site):
        with pytest.raises(StaticResourceForbidden):
            check_static_file(str(site), "css")

    def test_unreadable_file_is_forbidden(self, site, monkeypatch):
        def deny(*args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(static, "open", deny, raising=False)

        with pytest.raises(StaticResourceForbidden, match="wrong file permission"):
            check_static_file(str(site), "index.css")
