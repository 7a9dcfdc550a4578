from __future__ import annotations

"""ダークランプのブレンド（`ramp.blend`）のテスト。"""

import numpy as np
import pytest

from ramp import generate_ramp
from ramp.blend import DARK_COLOR_MAP, AmountMapping, blend_dark, mix, mix_rgb, validate_mapping
from ramp.color_types import Color
from ramp.engine import parse_hex

BLUE_DARK = [
    "#111a2c",
    "#112545",
    "#15325b",
    "#15417e",
    "#1554ad",
    "#1668dc",
    "#3c89e8",
    "#65a9f3",
    "#8dc5f8",
    "#b7dcfa",
]


@pytest.mark.smoke
def test_blue_dark_ramp(blue_seed: str, dark_background: str) -> None:
    """antd の blue ダークランプと一致する。"""
    assert generate_ramp(blue_seed, "dark", dark_background) == BLUE_DARK


def test_dark_background_defaults_to_141414(blue_seed: str) -> None:
    """背景色の既定は #141414。"""
    assert generate_ramp(blue_seed, "dark") == BLUE_DARK


def test_dark_seed_position_blend(blue_seed: str, dark_background: str) -> None:
    """位置 5 はシードを 85% で背景に重ねた色。"""
    bg = np.array(parse_hex(dark_background), dtype=np.float64)
    seed = np.array(parse_hex(blue_seed), dtype=np.float64)
    expected = np.floor(bg * 0.15 + seed * 0.85 + 0.5)
    got = np.array(parse_hex(generate_ramp(blue_seed, "dark", dark_background)[5]))
    np.testing.assert_array_equal(got, expected)


def test_mapping_table_shape() -> None:
    """対応表の参照位置と混合量。"""
    validate_mapping(DARK_COLOR_MAP)
    assert [m.light_index for m in DARK_COLOR_MAP] == [7, 6, 5, 5, 5, 5, 4, 3, 2, 1]
    assert [m.amount for m in DARK_COLOR_MAP] == [15, 25, 30, 45, 65, 85, 90, 95, 97, 98]
    assert all(m.amount > 0 for m in DARK_COLOR_MAP)


@pytest.mark.parametrize(
    "mapping",
    [
        DARK_COLOR_MAP[:9],
        DARK_COLOR_MAP[:9] + (AmountMapping(10, 50),),
        DARK_COLOR_MAP[:9] + (AmountMapping(1, 101),),
    ],
)
def test_validate_mapping_rejects(mapping) -> None:
    """長さ・参照位置・混合量が不正な対応表は拒否する。"""
    with pytest.raises(ValueError):
        validate_mapping(mapping)


def test_mix_endpoints() -> None:
    """混合量 0 は背景、100 はソースそのもの。"""
    bg = Color.from_hex("#141414")
    src = Color.from_hex("#1677ff")
    assert mix(bg, src, 0) == bg
    assert mix(bg, src, 100) == src
    assert mix(bg, src, 85).hex == "#1668dc"


def test_mix_rgb_rounds_half_up() -> None:
    """ブレンドも四捨五入で丸める。"""
    got = mix_rgb(np.array([0.0, 0.0, 0.0]), np.array([1.0, 3.0, 5.0]), 50)
    np.testing.assert_array_equal(got, [1, 2, 3])


def test_blend_reads_light_ramp_not_dark(blue_seed: str) -> None:
    """ブレンド元はライトランプの色。"""
    light = [Color.from_hex(h) for h in generate_ramp(blue_seed)]
    bg = Color.from_hex("#000000")
    dark = blend_dark(light, bg)
    # black background scales the light source channels directly
    for pos, (light_index, amount) in enumerate(DARK_COLOR_MAP):
        expected = np.floor(np.array(light[light_index].rgb) * (amount / 100) + 0.5)
        np.testing.assert_array_equal(np.array(dark[pos].rgb), expected)


def test_blend_dark_custom_mapping_and_size_check(blue_seed: str) -> None:
    """独自の対応表を使え、ライトランプの長さを検査する。"""
    light = [Color.from_hex(h) for h in generate_ramp(blue_seed)]
    bg = Color.from_hex("#141414")
    identity = tuple(AmountMapping(i, 100) for i in range(10))
    assert [c.hex for c in blend_dark(light, bg, identity)] == [c.hex for c in light]
    with pytest.raises(ValueError):
        blend_dark(light[:9], bg)
