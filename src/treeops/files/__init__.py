"""File tree operations - copy, delete, traverse, hash and path helpers."""

from treeops.files.archive import ZipFilesystem, create_zip_filesystem
from treeops.files.content import (
    create_file,
    load_file_with_unix_line_separators,
    sha1,
    write_to_file,
)
from treeops.files.models import FileKind, file_kind
from treeops.files.paths import (
    canonical,
    escape_system_dependent_chars,
    exploded_archive_layout,
    get_directory_name_for_jar,
    is_file_in_directory,
    is_same_file,
    join,
    join_file_paths,
    join_path,
    names_as_comma_separated_list,
    parent_dir_exists,
    relative_path,
    relative_possibly_non_existing_path,
    sanitize_file_name,
    to_exportable_system_dependent_path,
    to_system_dependent_path,
    to_system_independent_path,
)
from treeops.files.traversal import Traversal, find, find_by_name, get_all_files, walk_pre_order
from treeops.files.tree import (
    clean_output_dir,
    copy_directory,
    copy_directory_content_to_directory,
    copy_directory_to_directory,
    copy_file,
    copy_file_to_directory,
    delete,
    delete_directory_contents,
    delete_if_exists,
    delete_path,
    delete_recursively_if_exists,
    mkdirs,
    rename_to,
)

__all__ = [
    # Models
    "FileKind",
    "file_kind",
    # Tree
    "clean_output_dir",
    "copy_directory",
    "copy_directory_content_to_directory",
    "copy_directory_to_directory",
    "copy_file",
    "copy_file_to_directory",
    "delete",
    "delete_directory_contents",
    "delete_if_exists",
    "delete_path",
    "delete_recursively_if_exists",
    "mkdirs",
    "rename_to",
    # Content
    "create_file",
    "load_file_with_unix_line_separators",
    "sha1",
    "write_to_file",
    # Paths
    "canonical",
    "escape_system_dependent_chars",
    "exploded_archive_layout",
    "get_directory_name_for_jar",
    "is_file_in_directory",
    "is_same_file",
    "join",
    "join_file_paths",
    "join_path",
    "names_as_comma_separated_list",
    "parent_dir_exists",
    "relative_path",
    "relative_possibly_non_existing_path",
    "sanitize_file_name",
    "to_exportable_system_dependent_path",
    "to_system_dependent_path",
    "to_system_independent_path",
    # Traversal
    "Traversal",
    "find",
    "find_by_name",
    "get_all_files",
    "walk_pre_order",
    # Archives
    "ZipFilesystem",
    "create_zip_filesystem",
]
