from __future__ import annotations

"""Utilities for resolving knowledge-base map paths."""

from pathlib import Path


def kb_maps_path(path: str | None) -> str:
    return path or str(Path.cwd() / "kb" / "maps")


def find_map_file(name_or_path: str) -> str:
    """
    Find a layout file with smart resolution.

    1. If path exists as-is, use it
    2. If path exists with .yaml extension, use it
    3. Otherwise, look in kb/maps/ folder
    4. Add .yaml extension if missing

    Args:
        name_or_path: Either full path or just a map name (with or without .yaml)

    Returns:
        Resolved path to the layout file

    Raises:
        FileNotFoundError: If file cannot be found
    """
    p = Path(name_or_path)

    if p.is_file():
        return str(p)

    if not str(name_or_path).endswith(".yaml"):
        p_with_yaml = Path(f"{name_or_path}.yaml")
        if p_with_yaml.is_file():
            return str(p_with_yaml)

    base_name = p.name
    if not base_name.endswith(".yaml"):
        base_name = f"{base_name}.yaml"

    map_file = Path(kb_maps_path(None)) / base_name
    if map_file.is_file():
        return str(map_file)

    raise FileNotFoundError(f"Map file not found: '{name_or_path}'\nLooked in:\n  - {name_or_path}\n  - {map_file}")


__all__ = ["kb_maps_path", "find_map_file"]
