"""Stateless helpers."""

from .paths import escape_url, file_url_to_path, path_to_file_url, relative_path


__all__ = ["escape_url", "file_url_to_path", "path_to_file_url", "relative_path"]
