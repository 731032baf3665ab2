import random
import pytest
from hostkit.config import SequencerConfig
from hostkit.errors import InvalidArgument
from hostkit.sequencer.effects import (
    EffectContext,
    ENTRANCE_EFFECTS,
    EXIT_EFFECTS,
    backspace_out,
    erase_out,
    fade_in,
    fade_out,
    resolve_entrance,
    resolve_exit,
    scramble_in,
    scramble_out,
    show_instant,
    type_in,
    type_in_with_cursor,
)
from hostkit.sequencer.models import EntranceStyle, ExitStyle


CONFIG = SequencerConfig(
    char_delay=0.25,
    fade_steps=4,
    fade_delay=0.5,
    scramble_delay=0.125,
    scramble_alphabet="#",
    cursor="|",
)


@pytest.fixture
def ctx():
    return EffectContext(config=CONFIG, rng=random.Random(1))


def texts(target):
    return [value for _, value in target.history("text")]


def opacities(target):
    return [value for _, value in target.history("opacity")]


def test_instant_shows_everything_without_waiting(target, ctx):
    delays = list(show_instant(target, "Hello", ctx))

    assert delays == []
    assert target.text == "Hello"
    assert target.opacity == 1.0

def test_type_in_reveals_one_character_per_step(target, ctx):
    delays = list(type_in(target, "Hey", ctx))

    assert delays == [0.25, 0.25, 0.25]
    assert texts(target) == ["", "H", "He", "Hey"]

def test_type_in_with_cursor_trims_cursor(target, ctx):
    delays = list(type_in_with_cursor(target, "Hi", ctx))

    assert len(delays) == 3
    assert texts(target) == ["|", "H|", "Hi|", "Hi"]

def test_fade_in_ramps_opacity(target, ctx):
    delays = list(fade_in(target, "Hi", ctx))

    assert delays == [0.5] * 4
    assert opacities(target) == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert target.text == "Hi"

def test_scramble_in_resolves_left_to_right(target, ctx):
    delays = list(scramble_in(target, "ab c", ctx))

    assert delays == [0.125] * 4
    assert texts(target) == ["## #", "a# #", "ab #", "ab #", "ab c"]

def test_scramble_uses_configured_alphabet(target):
    config = SequencerConfig(scramble_alphabet="xyz")
    ctx = EffectContext(config=config, rng=random.Random(3))
    gen = scramble_in(target, "abcdefgh", ctx)
    next(gen)

    assert set(target.text) <= set("xyz")

def test_backspace_trims_from_the_end(target, ctx):
    delays = list(backspace_out(target, "Hey", ctx))

    assert delays == [0.25] * 3
    assert texts(target) == ["He", "H", ""]

def test_erase_removes_from_the_front(target, ctx):
    list(erase_out(target, "Hey", ctx))
    assert texts(target) == ["ey", "y", ""]

def test_fade_out_ends_transparent(target, ctx):
    delays = list(fade_out(target, "Hi", ctx))

    assert delays == [0.5] * 4
    assert opacities(target) == [0.75, 0.5, 0.25, 0.0]

def test_scramble_out_then_fades(target, ctx):
    list(scramble_out(target, "ab", ctx))

    assert texts(target) == ["#b", "##"]
    assert opacities(target)[-1] == 0.0

def test_exit_duration_spreads_steps(target):
    ctx = EffectContext(config=CONFIG, duration=1.0)

    assert list(backspace_out(target, "four", ctx)) == [0.25] * 4
    assert sum(fade_out(target, "x", ctx)) == pytest.approx(1.0)
    assert sum(scramble_out(target, "abcd", ctx)) == pytest.approx(1.0)

def test_every_style_has_an_effect():
    assert set(ENTRANCE_EFFECTS) == set(EntranceStyle)
    assert set(EXIT_EFFECTS) == set(ExitStyle)

def test_style_names_resolve():
    assert resolve_entrance("") is EntranceStyle.NONE
    assert resolve_entrance(None) is EntranceStyle.NONE
    assert resolve_entrance("Typewriter") is EntranceStyle.TYPEWRITER
    assert resolve_exit(ExitStyle.FADE) is ExitStyle.FADE
    assert resolve_exit("Scramble") is ExitStyle.SCRAMBLE

def test_unknown_style_names_are_rejected():
    with pytest.raises(InvalidArgument):
        resolve_entrance("Sparkle")
    with pytest.raises(InvalidArgument):
        resolve_exit("typewriter")
