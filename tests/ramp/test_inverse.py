from __future__ import annotations

"""シード逆算（`ramp.inverse`）のテスト。"""

import numpy as np
import pytest

from ramp import (
    ArithmeticGuard,
    IndexOutOfRange,
    InvalidColorFormat,
    generate_ramp,
    reverse_dark_color,
    reverse_light_color,
)
from ramp.blend import DARK_COLOR_MAP, AmountMapping
from ramp.color_types import Color
from ramp.engine import hex_to_hsv, hsv_to_hex
from ramp.inverse import check_index, invert_light_hsv, reverse_dark, unmix_rgb


def test_seed_position_is_identity(blue_seed: str) -> None:
    """位置 5 からの逆算は恒等。"""
    ramp = generate_ramp(blue_seed)
    assert reverse_light_color(ramp[5], 5) == blue_seed
    assert reverse_light_color("#ABC", 5) == "#aabbcc"


def test_reverse_first_shade_matches_rounded_seed(blue_seed: str) -> None:
    """1 段目の濃色から 2 桁丸めのシードに戻る。"""
    # the seed's saturation 0.9137 only survives as 0.91
    rounded_seed = hsv_to_hex(*hex_to_hsv(blue_seed))
    assert rounded_seed == "#1778ff"
    assert reverse_light_color("#0958d9", 6) == rounded_seed


def test_reverse_tint_loses_clamped_value() -> None:
    """クランプされた明度は逆算で戻らない。"""
    # the forward value 1.05 was clamped to 1.0, so inversion lands at 0.95
    assert reverse_light_color("#4096ff", 4) == "#1672f2"
    assert hex_to_hsv("#1672f2") == (215.0, 0.91, 0.95)


def test_invert_light_hsv_branches() -> None:
    """淡色・濃色・色相方向・最暗ステップ・グレーの各分岐。"""
    assert invert_light_hsv((213.0, 0.75, 1.0), 5) == (213.0, 0.75, 1.0)
    assert invert_light_hsv((213.0, 0.75, 1.0), 4) == (215.0, 0.91, 0.95)
    assert invert_light_hsv((217.0, 0.96, 0.85), 6) == (215.0, 0.91, 1.0)
    # hue outside [60, 240] turns the other way
    assert invert_light_hsv((20.0, 0.5, 0.5), 3) == (16.0, 0.82, 0.4)
    assert invert_light_hsv((20.0, 0.5, 0.8), 7) == (24.0, 0.4, 1.0)
    # darkest shade undoes the larger saturation step
    assert invert_light_hsv((100.0, 0.5, 0.3), 9) == (92.0, 0.34, 0.9)
    # greys keep saturation
    assert invert_light_hsv((0.0, 0.0, 0.6), 2) == (354.0, 0.0, 0.45)
    assert invert_light_hsv((0.0, 0.0, 0.6), 2, grey=True) == (354.0, 0.0, 0.45)


def test_invert_light_hsv_wraps_hue() -> None:
    """色相は 0..360 に折り返す。"""
    assert invert_light_hsv((2.0, 0.5, 0.5), 2) == (356.0, 0.98, 0.35)
    assert invert_light_hsv((358.0, 0.5, 0.5), 8) == (4.0, 0.35, 0.95)


def test_reverse_dark_seed_positions(blue_seed: str, dark_background: str) -> None:
    """シード由来のダーク位置は 0.5/p 程度の誤差で戻る。"""
    dark = generate_ramp(blue_seed, "dark", dark_background)
    assert reverse_dark_color(dark[5], 5, dark_background) == blue_seed
    seed = np.array(Color.from_hex(blue_seed).rgb, dtype=np.float64)
    for pos, (light_index, amount) in enumerate(DARK_COLOR_MAP):
        if light_index != 5:
            continue
        # the blend rounded each channel by up to 0.5, scaled up by 1/p on the way back
        p = amount / 100
        got = np.array(Color.from_hex(reverse_dark_color(dark[pos], pos, dark_background)).rgb)
        np.testing.assert_allclose(got, seed, atol=0.5 / p + 0.5)


def test_reverse_dark_goes_through_light_ramp(dark_background: str) -> None:
    """ダーク位置はアンミックス後にライトの逆算を通る。"""
    # dark[6] = light[4] at 90%; unmixing gives back #4096ff exactly
    assert reverse_dark_color("#3c89e8", 6, dark_background) == reverse_light_color("#4096ff", 4)


def test_unmix_rgb() -> None:
    """アンミックスの丸めとクランプ。"""
    bg = np.array([20.0, 20.0, 20.0])
    got = unmix_rgb(np.array([22.0, 104.0, 220.0]), bg, 85)
    np.testing.assert_array_equal(got, [22, 119, 255])
    # results that overshoot are clamped
    got = unmix_rgb(np.array([0.0, 255.0, 128.0]), bg, 50)
    np.testing.assert_array_equal(got, [0, 255, 236])


def test_zero_amount_is_guarded() -> None:
    """混合量 0 は ArithmeticGuard。"""
    with pytest.raises(ArithmeticGuard):
        unmix_rgb(np.array([1.0, 2.0, 3.0]), np.array([0.0, 0.0, 0.0]), 0)
    bad_map = (AmountMapping(5, 0),) + DARK_COLOR_MAP[1:]
    with pytest.raises(ArithmeticError):
        reverse_dark(Color.from_hex("#141414"), 0, Color.from_hex("#141414"), mapping=bad_map)


@pytest.mark.parametrize("index", [10, -1, 100, True, 1.0, "3", None])
def test_bad_index_rejected_before_parsing(index) -> None:
    """不正な位置は色の解析より先に拒否する。"""
    with pytest.raises(IndexOutOfRange):
        reverse_dark_color("not a color", index)
    with pytest.raises(IndexOutOfRange):
        reverse_light_color("not a color", index)


def test_index_out_of_range_is_index_error() -> None:
    """IndexOutOfRange は IndexError としても捕まえられる。"""
    with pytest.raises(IndexError):
        check_index(10)
    assert check_index(np.int64(3)) == 3


def test_bad_colors_rejected() -> None:
    """不正な色・背景色は InvalidColorFormat。"""
    with pytest.raises(InvalidColorFormat):
        reverse_light_color("#12", 3)
    with pytest.raises(InvalidColorFormat):
        reverse_dark_color("#1668dc", 5, "#zzzzzz")


def test_near_grey_entry_restores_saturation() -> None:
    """チャンネルが揃っていない淡色は彩度を戻して逆算する。"""
    assert invert_light_hsv((0.0, 0.0, 0.9), 3, grey=False) == (356.0, 0.32, 0.8)
    assert Color.from_hex("#fff0f0").is_grey is False
    assert Color.from_hex("#f2f2f2").is_grey is True
    # #fff0f0 is #fffefe's first tint; a grey reading would give #f2f2f2
    assert reverse_light_color("#fff0f0", 4) == "#f2bdbf"
    assert reverse_light_color("#f2f2f2", 4) == "#e6e6e6"
