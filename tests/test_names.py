from pathlib import Path

import pygame
import pytest

from golubrun.errors import ErrorReport
from golubrun.names import (
    FloatRect,
    ResourceLoader,
    Settings,
    centered_x,
    executable_dir,
    hyphenate,
    wrap_text,
)


def _png_bytes(tmp_path: Path) -> bytes:
    surface = pygame.Surface((4, 2), pygame.SRCALPHA, 32)
    surface.fill((255, 0, 0, 255), pygame.Rect(0, 0, 2, 2))
    surface.fill((0, 0, 255, 255), pygame.Rect(2, 0, 2, 2))
    path = tmp_path / "sheet.png"
    pygame.image.save(surface, str(path))
    return path.read_bytes()


def test_rects_overlapping_intersect_symmetrically():
    a = FloatRect(0, 0, 10, 10)
    b = FloatRect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rects_touching_or_apart_do_not_intersect():
    a = FloatRect(0, 0, 10, 10)
    assert not a.intersects(FloatRect(10, 0, 5, 5))
    assert not a.intersects(FloatRect(20, 20, 5, 5))


def test_rect_with_negative_size_is_normalised():
    assert FloatRect(10, 10, -5, -5).intersects(FloatRect(6, 6, 1, 1))


def test_hyphenate_pinned_example():
    assert hyphenate("abcdefg", 3) == "abcd\nefg\n"


def test_hyphenate_keeps_characters():
    text = "the quick brown fox"
    assert hyphenate(text, 4).replace("\n", "") == text


def test_hyphenate_rejects_zero():
    with pytest.raises(ValueError):
        hyphenate("abc", 0)


def test_wrap_text_breaks_lines():
    assert wrap_text("abcdef", 3) == "abc\ndef"


def test_wrap_text_lines_never_exceed_limit():
    text = "lorem ipsum dolor sit amet consectetur adipiscing"
    for width in (2, 5, 8):
        wrapped = wrap_text(text, width)
        assert all(len(line) <= width for line in wrapped.split("\n"))
        assert wrapped.replace("\n", "").replace(" ", "") == text.replace(" ", "")


def test_wrap_text_drops_leading_space_and_respects_newlines():
    assert wrap_text(" a", 5) == "a"
    assert wrap_text("ab\ncd", 2) == "ab\ncd"


def test_wrap_text_width_one_puts_each_character_alone():
    assert wrap_text("abc", 1) == "a\nb\nc"


def test_wrap_text_tab_counts_towards_line():
    assert wrap_text("\tab", 3).startswith("\t\n")


def test_executable_dir_cuts_at_last_separator():
    assert executable_dir("/usr/games/golub", "/") == "/usr/games/"
    assert executable_dir("C:\\games\\run.exe", "\\") == "C:\\games/"


def test_executable_dir_without_separator_keeps_whole_name():
    assert executable_dir("golub", "/") == "golub/"


def test_centered_x_centres_item():
    for left, width, item in [(0, 100, 20), (15, 311, 40), (-5, 10, 30)]:
        x = centered_x(left, width, item)
        assert x + item / 2 == pytest.approx(left + width / 2)


def test_settings_elapsed_combines_time_and_scale():
    settings = Settings(time=2000.0)
    assert settings.elapsed == pytest.approx(settings.microsec * 2000.0)


def test_load_image_from_data(tmp_path):
    reports: list[ErrorReport] = []
    data = _png_bytes(tmp_path)
    loader = ResourceLoader(str(tmp_path / "game"), reports.append, Settings())
    surface = loader.load_image("Images/sheet.png", data)
    assert surface.get_size() == (4, 2)
    assert surface.get_at((0, 0)) == (255, 0, 0, 255)
    assert reports == []


def test_load_image_prefers_resourcepack_file(tmp_path):
    reports: list[ErrorReport] = []
    data = _png_bytes(tmp_path)
    pack = tmp_path / "Resourcepack" / "Images"
    pack.mkdir(parents=True)
    (pack / "sheet.png").write_bytes(data)
    loader = ResourceLoader(str(tmp_path), reports.append, Settings())
    surface = loader.load_image("Images/sheet.png", b"not an image")
    assert surface.get_at((3, 1)) == (0, 0, 255, 255)
    assert reports == []


@pytest.mark.parametrize("shader_on, expected", [(True, (255, 0, 0, 255)), (False, (0, 0, 255, 255))])
def test_load_image_split_for_shader(tmp_path, shader_on, expected):
    data = _png_bytes(tmp_path)
    loader = ResourceLoader(str(tmp_path / "game"), [].append, Settings(shader_on=shader_on))
    surface = loader.load_image("Images/sheet.png", data, True)
    assert surface.get_size() == (2, 2)
    assert surface.get_at((0, 0)) == expected


def test_load_image_failure_reports(tmp_path):
    reports: list[ErrorReport] = []
    loader = ResourceLoader(str(tmp_path), reports.append, Settings())
    assert loader.load_image("Images/missing.png", b"junk") is None
    assert len(reports) == 1
    assert reports[0].code == "00000"
    assert "Images/missing.png" in reports[0].argument2


def test_load_shader_sources(tmp_path):
    reports: list[ErrorReport] = []
    pack = tmp_path / "Shaderpack"
    pack.mkdir()
    (pack / "glow.frag").write_text("void main() {}", encoding="utf-8")
    loader = ResourceLoader(str(tmp_path), reports.append, Settings())
    assert loader.load_shader("glow.frag", "fallback") == "void main() {}"
    assert loader.load_shader("other.frag", "fallback") == "fallback"
    assert reports == []


def test_load_shader_failure_reports(tmp_path):
    reports: list[ErrorReport] = []
    loader = ResourceLoader(str(tmp_path), reports.append, Settings())
    assert loader.load_shader("missing.frag", "") is None
    assert [report.code for report in reports] == ["00311"]