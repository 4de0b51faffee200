"""Path resolution for the base directory, the project directory and entries."""

import os

from projseed.scaffold.errors import InvalidBasePath, InvalidProjectName, PathEscapesProject


def resolve_project_path(base_path: str, project_name: str) -> str:
    """Validate base_path and project_name and return the project directory.

    Nothing is created; calling this repeatedly has no effect on disk.

    Raises:
        InvalidBasePath: If base_path does not exist or is not a directory
        InvalidProjectName: If project_name cannot name a single directory
    """
    if not base_path or not os.path.isdir(base_path):
        raise InvalidBasePath(f"Base directory not found: {base_path}")
    check_project_name(project_name)
    return os.path.join(base_path, project_name)


def check_project_name(project_name: str) -> None:
    if not project_name or not project_name.strip():
        raise InvalidProjectName("Project name must not be empty")
    if project_name in (".", ".."):
        raise InvalidProjectName(f"Invalid project name: {project_name}")
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in project_name for sep in separators):
        raise InvalidProjectName(
            f"Project name must not contain a path separator: {project_name}"
        )


def check_relative_path(relative_path: str) -> None:
    """Reject paths that are absolute or contain a parent-directory segment."""
    if not relative_path:
        raise PathEscapesProject("Entry path must not be empty")
    if os.path.isabs(relative_path) or relative_path.startswith(("/", "\\")):
        raise PathEscapesProject(f"Entry path must be relative: {relative_path}")
    segments = relative_path.replace("\\", "/").split("/")
    if ".." in segments:
        raise PathEscapesProject(
            f"Entry path escapes the project directory: {relative_path}"
        )
