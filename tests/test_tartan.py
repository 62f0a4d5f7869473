import pytest
from pydantic import ValidationError

from microsims.sims.tartan import (
    MACQUARRIE,
    Stripe,
    TartanSett,
    render_tartan_svg,
    scale_factor,
    sett_width,
    stripe_bands,
)


def test_macquarrie_sett_width():
    assert sett_width(MACQUARRIE) == 104


def test_scale_fits_repeats_on_short_side():
    assert scale_factor(MACQUARRIE, 3, 800, 600) == pytest.approx(600 / 312)
    assert scale_factor(MACQUARRIE, 1, 300, 900) == pytest.approx(300 / 104)


@pytest.mark.parametrize("repeats", [0, 11])
def test_repeats_out_of_range(repeats):
    with pytest.raises(ValueError):
        scale_factor(MACQUARRIE, repeats, 800, 600)


def test_bands_cover_extent_plus_one_sett():
    scale = 2.0
    bands = stripe_bands(MACQUARRIE, scale, 500)
    assert bands[0][0] == 0.0
    assert len(bands) % len(MACQUARRIE.stripes) == 0
    end = bands[-1][0] + bands[-1][1]
    assert end >= 500 + 104 * scale
    # contiguous
    for (o1, s1, _), (o2, _, _) in zip(bands, bands[1:]):
        assert o1 + s1 == pytest.approx(o2)


def test_bands_reject_non_positive_scale():
    with pytest.raises(ValueError):
        stripe_bands(MACQUARRIE, 0, 100)


def test_stripe_validation():
    with pytest.raises(ValidationError):
        Stripe(color=(0, 0, 300), width=1)
    with pytest.raises(ValidationError):
        Stripe(color=(0, 0, 0), width=0)
    with pytest.raises(ValidationError):
        TartanSett(name="empty", background=(0, 0, 0), stripes=[])


def test_svg_multiplies_weft_with_opacity():
    svg = render_tartan_svg(MACQUARRIE, 800, 600, repeats=3, horizontal_opacity=180)
    assert "mix-blend-mode:multiply" in svg
    assert 'fill-opacity="0.706"' in svg
    assert ">MacQuarrie Clan</tspan>" in svg


def test_svg_without_title():
    svg = render_tartan_svg(MACQUARRIE, 200, 200, repeats=1, horizontal_opacity=0, title=False)
    assert "<text" not in svg
    assert 'fill-opacity="0.000"' in svg


def test_opacity_out_of_range():
    with pytest.raises(ValueError):
        render_tartan_svg(horizontal_opacity=256)


def test_title_is_two_centred_lines_with_shadow():
    svg = render_tartan_svg(MACQUARRIE, 800, 600)
    # shadow and face each carry both lines
    assert svg.count(">MacQuarrie Clan</tspan>") == 2
    assert svg.count(">Tartan Pattern</tspan>") == 2
    assert svg.count("<text") == 2
    # face lines sit half a line above and below the centre (font size 48)
    assert '<tspan x="400.0" y="276.0">MacQuarrie Clan</tspan>' in svg
    assert '<tspan x="400.0" y="324.0">Tartan Pattern</tspan>' in svg
