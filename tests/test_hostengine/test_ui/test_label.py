import pytest
from unittest.mock import MagicMock
import pygame
from hostengine.ui import Label, Padding, UIRenderer, FontConfig
from hostkit.sequencer.models import DisplayTarget


def test_label_is_a_display_target():
    label = Label("Hello")
    assert isinstance(label, DisplayTarget)

def test_fluent_setters():
    label = Label()
    result = label.set_text("Hi").set_opacity(0.5).set_visible(False)

    assert result is label
    assert label.text == "Hi"
    assert label.opacity == 0.5
    assert not label.visible

def test_opacity_is_clamped():
    label = Label()
    label.set_opacity(3)
    assert label.opacity == 1.0
    label.set_opacity(-1)
    assert label.opacity == 0.0

def test_render_uses_opacity_as_alpha():
    label = Label("Fading", color=(200, 100, 50))
    label.set_position(10, 20)
    label.set_opacity(0.5)
    renderer = MagicMock()

    label.render(renderer)

    renderer.draw_text.assert_called_once()
    args, kwargs = renderer.draw_text.call_args
    assert args[0] == "Fading"
    assert (args[1], args[2]) == (10, 20)
    assert kwargs["color"] == (200, 100, 50, 128)

@pytest.mark.parametrize("setup", [
    lambda l: l.set_visible(False),
    lambda l: l.set_opacity(0.0),
    lambda l: l.set_text(""),
])
def test_render_skips_invisible_labels(setup):
    label = Label("Hidden")
    setup(label)
    renderer = MagicMock()

    label.render(renderer)

    renderer.draw_text.assert_not_called()

def test_center_alignment():
    label = Label("Mid")
    label.set_position(0, 0).set_size(200, 40)
    label.set_align("center")
    renderer = MagicMock()

    label.render(renderer)

    args, kwargs = renderer.draw_text.call_args
    assert args[1] == 100
    assert kwargs["align"] == "center"

def test_preferred_size_grows_with_text():
    short = Label("Hi", font_size=10).get_preferred_size()
    long = Label("Hello there", font_size=10).get_preferred_size()
    two_lines = Label("Hi\nthere", font_size=10).get_preferred_size()

    assert long[0] > short[0]
    assert two_lines[1] > short[1]

def test_padding_adds_to_preferred_size():
    plain = Label("Hi", font_size=10).get_preferred_size()
    padded = Label("Hi", font_size=10).set_padding(Padding.all(4)).get_preferred_size()

    assert padded == (plain[0] + 8, plain[1] + 8)

def _fake_font():
    font = MagicMock()
    font.get_height.return_value = 10
    font.size.side_effect = lambda text: (len(text) * 5, 10)

    def render(line, antialias, color):
        surface = MagicMock()
        surface.get_rect.return_value = pygame.Rect(0, 0, len(line) * 5, 10)
        return surface

    font.render.side_effect = render
    return font

def test_renderer_caches_fonts():
    renderer = UIRenderer(MagicMock())
    pygame.font.SysFont.return_value = _fake_font()

    first = renderer.get_font(FontConfig(size=16))
    second = renderer.get_font(FontConfig(size=16))

    assert first is second
    assert pygame.font.SysFont.call_count == 1

def test_renderer_applies_alpha_and_lines():
    surface = MagicMock()
    renderer = UIRenderer(surface)
    font = _fake_font()
    renderer._fonts[(None, 16, False, False)] = font

    rect = renderer.draw_text("one\ntwo", 5, 5, color=(255, 255, 255, 64))

    assert surface.blit.call_count == 2
    rendered = [c.args[0] for c in surface.blit.call_args_list]
    for text_surface in rendered:
        text_surface.set_alpha.assert_called_once_with(64)
    assert rect.height == 20

def test_renderer_wraps_long_text():
    renderer = UIRenderer(MagicMock())
    lines = renderer._wrap_text("aaa bbb ccc", _fake_font(), max_width=30)
    assert lines == ["aaa", "bbb", "ccc"]
