import textwrap

from axogrid.layout.grid_schema import ContainMode, GridType, SlotOrdering
from axogrid.presets.preset_loader import DEFAULT_PRESET_DIR, GridPresetLoader


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_load_valid_preset(tmp_path):
    path = _write(tmp_path, "bricks.yaml", """
        name: Bricks
        author: tester
        version: "2.0"
        grid:
          grid_type: staggered
          ordering: bottom_up
          contain_mode: top_left
          columns: 6
          spacing_y: 0.5
          include_hidden: true
    """)
    loader = GridPresetLoader()

    preset = loader.load_preset(path)

    assert preset is not None
    assert preset.name == "Bricks"
    assert preset.author == "tester"
    assert preset.version == "2.0"
    assert preset.path == path
    assert preset.parameters.grid_type is GridType.STAGGERED
    assert preset.parameters.ordering is SlotOrdering.BOTTOM_UP
    assert preset.parameters.contain_mode is ContainMode.TOP_LEFT
    assert preset.parameters.columns == 6
    assert preset.parameters.spacing_y == 0.5
    assert preset.parameters.include_hidden is True
    assert loader.loaded_presets["bricks"] is preset


def test_validate_structure_reports_problems():
    validate = GridPresetLoader.validate_structure

    assert validate({"name": "x", "version": "1"}) == (False, "Missing required field: grid")
    assert validate({"name": "x", "version": "1", "grid": []})[0] is False
    assert validate({"name": "x", "version": "1", "grid": {"colour": 1}}) == (
        False, "Unknown grid option: colour")
    assert validate({"name": "x", "version": "1", "grid": {"columns": "many"}}) == (
        False, "columns must be a number")
    assert validate({"name": "x", "version": "1", "grid": {"debug_overlay": 1}}) == (
        False, "debug_overlay must be true or false")
    valid, error = validate({"name": "x", "version": "1", "grid": {"ordering": "zigzag"}})
    assert valid is False
    assert error.startswith("ordering must be one of")
    assert validate({"name": "x", "version": "1", "grid": {"columns": 2}}) == (True, "")


def test_invalid_files_return_none(tmp_path):
    loader = GridPresetLoader()

    assert loader.load_preset(_write(tmp_path, "empty.yaml", "")) is None
    assert loader.load_preset(_write(tmp_path, "broken.yaml", "name: [unclosed")) is None
    assert loader.load_preset(_write(tmp_path, "bad.yaml", """
        name: Bad
        version: "1.0"
        grid:
          grid_type: hexagonal
    """)) is None
    assert loader.load_preset(tmp_path / "missing.yaml") is None
    assert loader.loaded_presets == {}


def test_list_available_presets_skips_invalid_and_missing_dirs(tmp_path):
    _write(tmp_path, "a.yaml", """
        name: A
        version: "1.0"
        grid:
          columns: 2
    """)
    _write(tmp_path, "b.yaml", "not: a preset")
    _write(tmp_path, "notes.txt", "ignored")

    presets = GridPresetLoader().list_available_presets([tmp_path, tmp_path / "nope"])

    assert [preset.name for preset in presets] == ["A"]


def test_bundled_presets_load():
    presets = GridPresetLoader().list_available_presets()
    names = {preset.name for preset in presets}

    assert DEFAULT_PRESET_DIR.exists()
    assert names == {"Standard", "Isometric", "Hex", "Spiral Gallery"}
    hex_preset = next(preset for preset in presets if preset.name == "Hex")
    assert hex_preset.parameters.grid_type is GridType.STAGGERED
