# test_rules.py
# -------------------------------------------------------------
# Unit tests for the pure constraint rules in rules.py.
# -------------------------------------------------------------

import pytest

from assets import ImageInfo
from rules import (
    CHANGELOG_MAX_LENGTH,
    DESCRIPTIVE_TEXT_LIMITS,
    check_image_rule,
    check_screenshot,
    check_text_length,
    edge_ratio,
    requires_opacity,
)


@pytest.mark.parametrize("filename,limit", sorted(DESCRIPTIVE_TEXT_LIMITS.items()))
def test_text_at_limit_passes(filename, limit):
    assert check_text_length(limit, limit) == []


def test_text_over_limit_names_both_counts():
    msgs = check_text_length(51, DESCRIPTIVE_TEXT_LIMITS["title.txt"])
    assert msgs == ["content length exceeded: expected=50, got=51"]


def test_changelog_limit():
    assert CHANGELOG_MAX_LENGTH == 500
    assert check_text_length(501, CHANGELOG_MAX_LENGTH) == [
        "content length exceeded: expected=500, got=501"
    ]


def test_icon_512_png_passes():
    assert check_image_rule("icon", ImageInfo(512, 512, "png")) == []


def test_icon_wrong_size_single_violation():
    assert check_image_rule("icon", ImageInfo(511, 511, "png")) == ["icon must be 512x512: got=511x511"]


def test_icon_jpeg_single_format_violation():
    assert check_image_rule("icon", ImageInfo(512, 512, "jpeg")) == ["icon must be a PNG"]


def test_feature_graphic_transparent_only_opacity_violation():
    msgs = check_image_rule("featureGraphic", ImageInfo(1024, 500, "png"), opaque=False)
    assert msgs == ["featureGraphic must be opaque"]


@pytest.mark.parametrize("key,size", [
    ("featureGraphic", (1024, 500)),
    ("promoGraphic", (180, 120)),
    ("tvBanner", (1280, 720)),
])
def test_opaque_graphics_pass_at_exact_size(key, size):
    assert check_image_rule(key, ImageInfo(size[0], size[1], "png"), opaque=True) == []
    assert requires_opacity(key)


def test_tv_banner_dimensions_and_opacity_both_reported():
    msgs = check_image_rule("tvBanner", ImageInfo(720, 1280, "png"), opaque=False)
    assert msgs == ["tvBanner must be 1280x720: got=720x1280", "tvBanner must be opaque"]


def test_opacity_skipped_when_not_decoded():
    assert check_image_rule("promoGraphic", ImageInfo(180, 120, "png")) == []


def test_unknown_key_is_ignored():
    assert check_image_rule("banner", ImageInfo(1, 1, "png")) == []
    assert not requires_opacity("icon")


def test_screenshot_narrow_width_only():
    msgs = check_screenshot(ImageInfo(300, 400, "png"))
    assert len(msgs) == 1
    assert msgs[0].startswith("width should be in range 320px-3840px")


def test_screenshot_too_large_square():
    msgs = check_screenshot(ImageInfo(4000, 4000, "png"))
    assert msgs == [
        "width should be in range 320px-3840px: got=4000px",
        "height should be in range 320px-3840px: got=4000px",
    ]


def test_screenshot_ratio_boundary():
    assert check_screenshot(ImageInfo(640, 320, "png")) == []
    assert check_screenshot(ImageInfo(646, 320, "png")) == [
        "'max:min' edge ratio should be at most 2.0: got=2.02"
    ]


def test_edge_ratio_is_orientation_independent():
    assert edge_ratio(320, 640) == edge_ratio(640, 320) == 2.0
    assert edge_ratio(500, 500) == 1.0
