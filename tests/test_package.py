"""Tests for the lazy wrappers exposed at package level."""

import ascii_studio
import ascii_studio.text_to_ascii  # noqa: F401  binds the submodule on the package
from ascii_studio.options import RenderOptions
from ascii_studio.pipeline import AsciiGrid


class TestLazyWrappers:
    def test_exports_are_callable(self):
        for name in ascii_studio.__all__:
            assert callable(getattr(ascii_studio, name)), name

    def test_convert_text_after_submodule_import(self):
        grid = ascii_studio.convert_text("Hi", RenderOptions(width=20, height=10))
        assert isinstance(grid, AsciiGrid)
        assert 1 <= grid.height <= 10

    def test_render(self, solid):
        grid = ascii_studio.render(solid(4, 4, (0, 0, 0, 255)), RenderOptions(10, 10))
        assert isinstance(grid, AsciiGrid)
        assert grid.lines()[0] == "$" * 10

    def test_convert_image(self, solid):
        img = solid(8, 8, (0, 0, 0, 255)).to_image()
        grid = ascii_studio.convert_image(img, RenderOptions(width=10, height=10))
        assert grid.height == 10

    def test_text_main(self, capsys):
        assert ascii_studio.text_to_ascii_main(["--list-fonts"]) == 0
        assert "Arial" in capsys.readouterr().out
