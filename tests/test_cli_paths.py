from pathlib import Path

import pytest


def test_kb_maps_default(tmp_path, monkeypatch):
    """Default maps folder is kb/maps under the working directory."""
    monkeypatch.chdir(tmp_path)
    from mansion.cli.paths import kb_maps_path

    assert Path(kb_maps_path(None)) == tmp_path / "kb" / "maps"
    assert kb_maps_path("custom") == "custom"


def test_find_map_file_existing_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from mansion.cli.paths import find_map_file

    target = tmp_path / "house.yaml"
    target.write_text("mansion: {}\n", encoding="utf-8")

    assert Path(find_map_file(str(target))) == target


def test_find_map_file_adds_extension(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from mansion.cli.paths import find_map_file

    (tmp_path / "house.yaml").write_text("mansion: {}\n", encoding="utf-8")

    assert Path(find_map_file("house")) == Path("house.yaml")


def test_find_map_file_in_kb(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from mansion.cli.paths import find_map_file

    maps_dir = tmp_path / "kb" / "maps"
    maps_dir.mkdir(parents=True)
    (maps_dir / "manor.yaml").write_text("mansion: {}\n", encoding="utf-8")

    assert Path(find_map_file("manor")) == maps_dir / "manor.yaml"
    assert Path(find_map_file("other/manor.yaml")) == maps_dir / "manor.yaml"


def test_find_map_file_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from mansion.cli.paths import find_map_file

    with pytest.raises(FileNotFoundError, match="Map file not found"):
        find_map_file("ghost")
