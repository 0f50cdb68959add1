# rules.py
# -------------------------------------------------------------
# Constraint rules for listing assets.
# Each check is a pure function: decoded attributes in,
# list of human-readable messages out (empty list = pass).
# Rule tables are plain data so a new file or image key is
# a table entry, not a new branch.
# -------------------------------------------------------------

from dataclasses import dataclass
from typing import Dict, List, Optional

from assets import ImageInfo

# ---------- Text limits ----------

DESCRIPTIVE_TEXT_LIMITS: Dict[str, int] = {
    "title.txt": 50,
    "short_description.txt": 80,
    "full_description.txt": 4000,
}

CHANGELOG_MAX_LENGTH = 500

# ---------- Image rules ----------

@dataclass(frozen=True)
class ImageRule:
    width: int
    height: int
    format: Optional[str] = None  # required encoding, None = any supported
    opaque: bool = False          # every pixel must be fully opaque

IMAGE_RULES: Dict[str, ImageRule] = {
    "icon": ImageRule(512, 512, format="png"),
    "featureGraphic": ImageRule(1024, 500, opaque=True),
    "promoGraphic": ImageRule(180, 120, opaque=True),
    "tvBanner": ImageRule(1280, 720, opaque=True),
}

SCREENSHOT_DIR_SUFFIX = "Screenshots"
SCREENSHOT_MIN_EDGE = 320
SCREENSHOT_MAX_EDGE = 3840
SCREENSHOT_MAX_RATIO = 2.0

# ---------- Checks ----------

def check_text_length(count: int, max_length: int) -> List[str]:
    if count > max_length:
        return [f"content length exceeded: expected={max_length}, got={count}"]
    return []

def check_image_dimensions(key: str, rule: ImageRule, info: ImageInfo) -> List[str]:
    if info.width != rule.width or info.height != rule.height:
        return [f"{key} must be {rule.width}x{rule.height}: got={info.width}x{info.height}"]
    return []

def check_image_format(key: str, rule: ImageRule, info: ImageInfo) -> List[str]:
    if rule.format is not None and info.format != rule.format:
        return [f"{key} must be a {rule.format.upper()}"]
    return []

def check_image_opacity(key: str, rule: ImageRule, opaque: bool) -> List[str]:
    if rule.opaque and not opaque:
        return [f"{key} must be opaque"]
    return []

def check_image_rule(key: str, info: ImageInfo, opaque: Optional[bool] = None) -> List[str]:
    """
    Apply the IMAGE_RULES entry for `key`. The opacity rule is skipped
    when `opaque` is None (not decoded). Unknown keys produce no messages.
    """
    rule = IMAGE_RULES.get(key)
    if rule is None:
        return []
    msgs: List[str] = []
    msgs += check_image_dimensions(key, rule, info)
    msgs += check_image_format(key, rule, info)
    if opaque is not None:
        msgs += check_image_opacity(key, rule, opaque)
    return msgs

def edge_ratio(width: int, height: int) -> float:
    """Longer edge over shorter edge, always >= 1."""
    return max(width, height) / min(width, height)

def check_screenshot(info: ImageInfo) -> List[str]:
    """
    Width, height and aspect ratio are independent checks;
    one screenshot can fail all three.
    """
    msgs: List[str] = []
    if not SCREENSHOT_MIN_EDGE <= info.width <= SCREENSHOT_MAX_EDGE:
        msgs.append(
            f"width should be in range {SCREENSHOT_MIN_EDGE}px-{SCREENSHOT_MAX_EDGE}px: got={info.width}px"
        )
    if not SCREENSHOT_MIN_EDGE <= info.height <= SCREENSHOT_MAX_EDGE:
        msgs.append(
            f"height should be in range {SCREENSHOT_MIN_EDGE}px-{SCREENSHOT_MAX_EDGE}px: got={info.height}px"
        )
    ratio = edge_ratio(info.width, info.height)
    if ratio > SCREENSHOT_MAX_RATIO:
        msgs.append(f"'max:min' edge ratio should be at most {SCREENSHOT_MAX_RATIO}: got={ratio:.2f}")
    return msgs

def requires_opacity(key: str) -> bool:
    rule = IMAGE_RULES.get(key)
    return rule is not None and rule.opaque
