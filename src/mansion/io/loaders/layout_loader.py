from __future__ import annotations

import glob
import os
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, ValidationError

from mansion.core.maps.layout import MansionLayout
from mansion.io.loaders.errors import LoaderError


class LayoutFileSpec(BaseModel):
    mansion: MansionLayout


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise LoaderError(path, "Unable to read layout file", cause=exc) from exc
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML in layout file", cause=exc) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LoaderError(path, f"Layout file must contain a mapping, got {type(data).__name__}")
    return data


def load_layout(path: str) -> MansionLayout:
    """Load a mansion layout from a YAML file.

    Expected format:
    mansion:
      name: Detective Quest
      root: 0
      rooms: [Hall de entrada, Sala de Estar, Biblioteca]
      links:
        - {parent: 0, side: left, child: 1}
        - {parent: 0, side: right, child: 2}
    """
    if not os.path.isfile(path):
        raise LoaderError(path, "Layout file not found")
    data = _read_yaml(path)
    try:
        spec = LayoutFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid mansion layout", cause=exc) from exc
    return spec.mansion


def load_layouts(path: str) -> Dict[str, MansionLayout]:
    """Load every ``*.yaml`` layout in a directory tree, keyed by file stem."""
    if not os.path.exists(path):
        return {}
    files: List[str] = sorted(glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True))
    layouts: Dict[str, MansionLayout] = {}
    for fp in files:
        name = os.path.splitext(os.path.basename(fp))[0]
        if name in layouts:
            raise LoaderError(fp, f"Duplicate layout name '{name}'")
        layouts[name] = load_layout(fp)
    return layouts


__all__ = ["LayoutFileSpec", "load_layout", "load_layouts"]
