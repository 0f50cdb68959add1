# validators.py
# -------------------------------------------------------------
# Locale walker for Fastlane Android listing metadata.
# Walks <fastlane>/metadata/android/<locale>/ and runs the
# descriptive text, image/screenshot and changelog checks.
# Exposes: run_core_validations(config) -> RunReport
# -------------------------------------------------------------

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from assets import AssetReadError, read_character_count, read_image_info, read_opacity
from locales import is_known_locale
from report import RunReport
from rules import (
    CHANGELOG_MAX_LENGTH,
    DESCRIPTIVE_TEXT_LIMITS,
    IMAGE_RULES,
    SCREENSHOT_DIR_SUFFIX,
    check_image_rule,
    check_screenshot,
    check_text_length,
    requires_opacity,
)

LOGGER = logging.getLogger("listing_validator")

IMAGES_DIR = "images"
CHANGELOGS_DIR = "changelogs"


class MetadataRootError(Exception):
    """The metadata root is missing or unreadable; nothing can be validated."""


@dataclass
class ValidationConfig:
    fastlane_path: str = "./fastlane"
    enable_ga_annotations: bool = False
    check_locales: bool = False
    report_path: Optional[str] = None
    report_format: str = "csv"

    @property
    def metadata_path(self) -> str:
        return os.path.join(self.fastlane_path, "metadata", "android")


# ---------- Directory helpers ----------

def _list_dir(path: str) -> List[os.DirEntry]:
    """Directory entries sorted by name, so runs are reproducible."""
    with os.scandir(path) as it:
        return sorted(it, key=lambda e: e.name)

def _list_optional_dir(report: RunReport, locale: str, rel_dir: str, path: str) -> Optional[List[os.DirEntry]]:
    """
    List an optional category directory.
    Missing -> None with no entry; present but unreadable -> None plus an IOFailure.
    """
    try:
        return _list_dir(path)
    except FileNotFoundError:
        LOGGER.debug("[%s] no %s/ directory, skipping", locale, rel_dir)
        return None
    except OSError as e:
        report.add_failure(locale, rel_dir, f'failed to read directory "{path}": {e}')
        return None

# ---------- Category checks ----------

def check_descriptive_texts(report: RunReport, locale: str, locale_path: str) -> None:
    """
    title / short / full description are all required: a missing file
    is reported the same way as an unreadable one.
    """
    for filename, max_length in DESCRIPTIVE_TEXT_LIMITS.items():
        path = os.path.join(locale_path, filename)
        try:
            count = read_character_count(path)
        except AssetReadError as e:
            report.add_failure(locale, filename, str(e))
            continue
        report.add_violations(locale, filename, check_text_length(count, max_length))

def check_changelogs(report: RunReport, locale: str, locale_path: str) -> None:
    changelogs_path = os.path.join(locale_path, CHANGELOGS_DIR)
    entries = _list_optional_dir(report, locale, CHANGELOGS_DIR, changelogs_path)
    if entries is None:
        return
    for entry in entries:
        if entry.is_dir():
            continue  # not recursed
        rel = os.path.join(CHANGELOGS_DIR, entry.name)
        try:
            count = read_character_count(entry.path)
        except AssetReadError as e:
            report.add_failure(locale, rel, str(e))
            continue
        report.add_violations(locale, rel, check_text_length(count, CHANGELOG_MAX_LENGTH))

def check_image(report: RunReport, locale: str, rel: str, path: str, key: str) -> None:
    try:
        info = read_image_info(path)
    except AssetReadError as e:
        report.add_failure(locale, rel, str(e))
        return

    opaque = None
    if requires_opacity(key):
        try:
            opaque = read_opacity(path)
        except AssetReadError as e:
            report.add_failure(locale, rel, str(e))
            return
    report.add_violations(locale, rel, check_image_rule(key, info, opaque=opaque))

def check_screenshots(report: RunReport, locale: str, rel_dir: str, path: str) -> None:
    try:
        entries = _list_dir(path)
    except OSError as e:
        report.add_failure(locale, rel_dir, f'failed to read directory "{path}": {e}')
        return
    for entry in entries:
        if entry.is_dir():
            continue
        rel = os.path.join(rel_dir, entry.name)
        try:
            info = read_image_info(entry.path)
        except AssetReadError as e:
            report.add_failure(locale, rel, str(e))
            continue
        report.add_violations(locale, rel, check_screenshot(info))

def check_images(report: RunReport, locale: str, locale_path: str) -> None:
    images_path = os.path.join(locale_path, IMAGES_DIR)
    entries = _list_optional_dir(report, locale, IMAGES_DIR, images_path)
    if entries is None:
        return
    for entry in entries:
        rel = os.path.join(IMAGES_DIR, entry.name)
        if entry.is_dir():
            if entry.name.endswith(SCREENSHOT_DIR_SUFFIX):
                check_screenshots(report, locale, rel, entry.path)
            continue
        key = os.path.splitext(entry.name)[0]
        if key not in IMAGE_RULES:
            LOGGER.debug("[%s] ignoring unknown image %s", locale, rel)
            continue
        check_image(report, locale, rel, entry.path, key)

def check_locale_name(report: RunReport, locale: str) -> None:
    if not is_known_locale(locale):
        report.add_violations(locale, "", [f'unknown locale "{locale}"'])

# ---------- Main entry point ----------

def run_core_validations(config: ValidationConfig) -> RunReport:
    """
    Walk every locale directory and collect all violations and I/O failures.
    Never stops early; raises MetadataRootError only if the root itself is unusable.
    """
    metadata_path = config.metadata_path
    try:
        locale_entries = _list_dir(metadata_path)
    except OSError as e:
        raise MetadataRootError(f'failed to read directory "{metadata_path}": {e}') from e

    report = RunReport(metadata_path=metadata_path)
    for entry in locale_entries:
        if not entry.is_dir():
            continue  # only locale directories matter
        locale = entry.name
        LOGGER.debug("Checking locale %s", locale)
        if config.check_locales:
            check_locale_name(report, locale)
        check_descriptive_texts(report, locale, entry.path)
        check_images(report, locale, entry.path)
        check_changelogs(report, locale, entry.path)

    LOGGER.info("Validated %s: %d error(s)", metadata_path, len(report))
    return report
