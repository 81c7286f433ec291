"""File creation service - folder hierarchy, templated files, suffix parsing."""

from .actions import create_folder_structure, create_files, parse_suffixes, identify_workspace

__all__ = [
    'create_folder_structure',
    'create_files',
    'parse_suffixes',
    'identify_workspace',
]
