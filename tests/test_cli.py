"""Tests for the command-line interface."""

import json

import pytest
from PIL import Image

from spritelab.__main__ import main


class TestSliceCommand:
    def test_writes_strip_and_atlas(self, tmp_path, sheet_png, capsys):
        source = tmp_path / "sheet.png"
        source.write_bytes(sheet_png)
        output = tmp_path / "out" / "mort.png"

        main(["slice", str(source), "-o", str(output), "--name", "mort"])

        assert Image.open(output).size == (576, 24)
        atlas = json.loads((tmp_path / "out" / "mort.json").read_text())
        assert atlas["meta"]["image"] == "/characters/mort.png"
        assert "Detected 10 boxes, filled 9/24 slots" in capsys.readouterr().out

    def test_without_name_skips_atlas(self, tmp_path, sheet_png):
        source = tmp_path / "sheet.png"
        source.write_bytes(sheet_png)
        output = tmp_path / "strip.png"

        main(["slice", str(source), "-o", str(output), "--detector", "grid"])

        assert output.exists()
        assert not (tmp_path / "strip.json").exists()

    def test_rejects_unknown_name(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["slice", "in.png", "-o", str(tmp_path / "o.png"), "--name", "bob"])
