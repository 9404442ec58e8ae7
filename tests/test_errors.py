import io

import pytest

from golubrun.errors import (
    ErrorField,
    ErrorOverlay,
    font_load_error,
    image_load_error,
    shader_load_error,
    sound_load_error,
    texture_load_error,
)


def _measure(text, size):
    return (len(text) * size + 10.0, float(size))


def _fade_alphas(overlay, steps=200, elapsed=0.1):
    alphas = []
    for _ in range(steps):
        overlay.update(elapsed)
        alphas.append(overlay.alpha())
    return alphas


@pytest.mark.parametrize(
    "factory, code",
    [
        (texture_load_error, "00000"),
        (font_load_error, "00100"),
        (image_load_error, "00200"),
        (sound_load_error, "00300"),
    ],
)
def test_report_codes_and_arguments(factory, code):
    report = factory(5, "Images/icon.png")
    assert report.lines()[ErrorField.REPORT] == f"==========> ERROR [{code}] <=========="
    assert "[ 5 ]" in report.argument1
    assert "Images/icon.png" in report.argument2
    assert len(report.lines()) == len(ErrorField)


def test_image_report_leaves_data_line_blank():
    assert image_load_error(3, "x.png").argument0 == ""


def test_shader_report_fields():
    report = shader_load_error("void main() {}", "glow.frag")
    assert report.code == "00311"
    assert "void main() {}" in report.argument0
    assert "glow.frag" in report.argument1
    assert report.argument2 == ""


def test_format_layout_of_report():
    report = texture_load_error(7, "a.png")
    text = report.format()
    assert text.startswith("\n" + report.heading + "\n\n" + report.function + "\n\n")
    assert text.endswith(report.argument2 + "\n\n")
    for line in report.lines():
        assert line in text


def test_report_writes_to_stream():
    stream = io.StringIO()
    overlay = ErrorOverlay(stream)
    report = font_load_error(1, "font.otf")
    overlay.report(report)
    assert stream.getvalue() == report.format()


def test_overlay_hidden_before_any_report():
    overlay = ErrorOverlay(io.StringIO())
    overlay.update(0.5)
    assert overlay.alpha() == 0
    assert overlay.visible_lines() == ()


def test_overlay_shows_reported_lines():
    overlay = ErrorOverlay(io.StringIO())
    report = sound_load_error(2, "beep.ogg")
    overlay.report(report)
    overlay.update(0.1)
    assert overlay.alpha() > 0
    assert overlay.visible_lines() == report.lines()


def test_overlay_fades_in_holds_and_fades_out():
    overlay = ErrorOverlay(io.StringIO())
    overlay.report(texture_load_error(1, "a.png"))
    alphas = _fade_alphas(overlay)
    assert max(alphas) == 255
    assert alphas[-1] == 0
    first_peak = alphas.index(255)
    last_peak = len(alphas) - 1 - alphas[::-1].index(255)
    rising = alphas[: first_peak + 1]
    falling = alphas[last_peak:]
    assert rising == sorted(rising)
    assert falling == sorted(falling, reverse=True)
    assert overlay.visible_lines() == ()


def test_new_report_during_display_keeps_old_text():
    overlay = ErrorOverlay(io.StringIO())
    first = texture_load_error(1, "a.png")
    second = font_load_error(2, "b.otf")
    overlay.report(first)
    overlay.update(0.1)
    overlay.report(second)
    overlay.update(0.1)
    assert overlay.visible_lines() == first.lines()


def test_report_after_fade_out_shows_new_text():
    overlay = ErrorOverlay(io.StringIO())
    overlay.report(texture_load_error(1, "a.png"))
    _fade_alphas(overlay)
    second = font_load_error(2, "b.otf")
    overlay.report(second)
    overlay.update(0.1)
    assert overlay.visible_lines() == second.lines()


def test_layout_stacks_and_centres_lines():
    overlay = ErrorOverlay(io.StringIO())
    overlay.report(texture_load_error(9, "Images/x.png"))
    overlay.update(0.1)
    window_width = 800.0
    layout = overlay.layout(1.0, window_width, _measure)
    assert layout.character_size == 4
    assert layout.lines[0].y == pytest.approx(2.0)
    for previous, current in zip(layout.lines, layout.lines[1:]):
        assert current.y == pytest.approx(previous.y + previous.height)
    for line in layout.lines:
        assert line.x + line.width / 2 == pytest.approx(window_width / 2)
    assert [line.text for line in layout.lines] == list(overlay.visible_lines())


def test_layout_box_and_colors_follow_lines():
    overlay = ErrorOverlay(io.StringIO())
    overlay.report(shader_load_error("src", "glow.frag"))
    overlay.update(0.1)
    layout = overlay.layout(2.0, 640.0, _measure)
    function = layout.lines[ErrorField.FUNCTION]
    first, last = layout.lines[0], layout.lines[-1]
    assert layout.box == (function.x, first.y, function.width, last.y + last.height - first.y)
    assert layout.outline_thickness == 2.0
    assert layout.text_color[3] == overlay.alpha()
    assert layout.fill_color[3] == overlay.alpha()
    assert layout.outline_color[3] == overlay.alpha()