"""Unit tests for path safety primitives."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from swiftkit.processors.path_safety import exists_on_disk, is_contained, resolve_lexically, sanitize_name


class TestSanitizeName:
    """Tests for sanitize_name."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("photo.jpg", "photo.jpg"),
            ("a/b.txt", "ab.txt"),
            ("a\\b.txt", "ab.txt"),
            ('what?<>:*|".txt', "what.txt"),
            ("nul\x00byte.txt", "nulbyte.txt"),
            ("tab\there.txt", "tabhere.txt"),
            ("..", ""),
            (".", ""),
            ("CON", ""),
            ("com1.txt", ""),
            ("trailing. . ", "trailing"),
            ("../../etc/passwd", "....etcpasswd"),
        ],
    )
    def test_strips_unsafe_parts(self, name, expected):
        assert sanitize_name(name) == expected

    def test_keeps_hidden_files(self):
        """Test that a leading dot is not treated as reserved."""
        assert sanitize_name(".gitignore") == ".gitignore"

    def test_keeps_unicode(self):
        assert sanitize_name("résumé 2024.pdf") == "résumé 2024.pdf"

    def test_truncates_to_255_bytes(self):
        result = sanitize_name("é" * 200)

        assert len(result.encode("utf-8")) <= 255
        assert result == "é" * 127

    def test_keeps_undecodable_bytes(self):
        """Test names listed from disk with non-UTF-8 bytes pass through."""
        name = b"a\xff.txt".decode("utf-8", errors="surrogateescape")

        assert sanitize_name(name) == name

    def test_truncates_undecodable_names(self):
        name = (b"\xff" * 300).decode("utf-8", errors="surrogateescape")

        result = sanitize_name(name)

        assert result.encode("utf-8", errors="surrogateescape") == b"\xff" * 255

    def test_is_deterministic(self):
        assert sanitize_name("a:b") == sanitize_name("a:b")


class TestIsContained:
    """Tests for is_contained."""

    def test_child_is_contained(self):
        assert is_contained("/data", "/data/a.txt")

    def test_relative_child_is_contained(self):
        assert is_contained("/data", "a.txt")

    def test_base_itself_is_contained(self):
        assert is_contained("/data", "/data")

    def test_traversal_escapes(self):
        assert not is_contained("/data", "/data/../etc/passwd")

    def test_relative_traversal_escapes(self):
        assert not is_contained("/data", "../x")

    def test_sibling_with_shared_prefix_is_not_contained(self):
        """Test that /data2 is not considered inside /data."""
        assert not is_contained("/data", "/data2/a.txt")

    def test_resolve_lexically_normalizes(self):
        assert resolve_lexically("/data", "sub/../a.txt") == Path("/data/a.txt")


class TestExistsOnDisk:
    """Tests for exists_on_disk."""

    def test_existing_file(self, tmp_path):
        path = tmp_path / "a.txt"
        path.touch()

        assert exists_on_disk(path)

    def test_missing_file(self, tmp_path):
        assert not exists_on_disk(tmp_path / "missing.txt")

    def test_dangling_symlink_exists(self, tmp_path):
        link = tmp_path / "link"
        os.symlink(tmp_path / "nowhere", link)

        assert exists_on_disk(link)

    def test_dangling_symlink_missing_when_followed(self, tmp_path):
        link = tmp_path / "link"
        os.symlink(tmp_path / "nowhere", link)

        assert not exists_on_disk(link, follow_symlinks=True)

    def test_live_symlink_exists_when_followed(self, tmp_path):
        target = tmp_path / "real.txt"
        target.touch()
        link = tmp_path / "link"
        os.symlink(target, link)

        assert exists_on_disk(link, follow_symlinks=True)

    def test_other_errors_propagate(self, tmp_path):
        """Test that errors other than not-found are not read as absence."""
        with patch("swiftkit.processors.path_safety.os.stat", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError):
                exists_on_disk(tmp_path / "a.txt")
