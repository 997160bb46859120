from __future__ import annotations

from .fingerprints import (
    ACCESSIBILITY_ATTR_RE,
    APP_HEAVY_MIN_SIGNALS,
    APP_HEAVY_WARNING,
    APP_SUBDOMAIN_MIN_HOSTS,
    APP_SUBDOMAIN_RE,
    APP_VENDOR_TOKENS,
    ARIA_PREFIX,
    ASSET_SCRIPT_RE,
    COLOR_CLASS_RE,
    CSS_UTILITY_CLASS_RE,
    CUSTOM_MIN_SCORE,
    DAWN_CSS_TOKENS,
    DAWN_LIKE_MIN_SCORE,
    DAWN_SECTION_TOKENS,
    JSON_SCRIPT_MARKER,
    LEGACY_THEME_WARNING,
    LIQUID_COMMENT_MARKERS,
    LOW_ACCESSIBILITY_WARNING,
    MEDIA_WRAPPER_TOKEN,
    MIN_SHOPIFY_SIGNALS,
    SECTION_DATA_ATTR_MARKER,
    SECTION_MARKER,
    SHOPIFY_ANYCASE_RE,
    SHOPIFY_CDN_HOST,
    SHOPIFY_CDN_PATH,
    SHOPIFY_KEYWORD,
    SHOPIFY_SHOP_GLOBAL,
    SHOPIFY_THEME_GLOBAL,
    THEME_VERSION_RE,
)
from .models import DetectedFeatures, ThemeArchitecture


def shopify_signals(html: str | None) -> set[str]:
    """Return the independent Shopify fingerprints found in raw HTML.

    Matching is case-sensitive except for the asset probe, which pairs an
    ``/assets/*.js`` path with any casing of the platform name.
    """
    if not html:
        return set()
    signals: set[str] = set()

    if SHOPIFY_CDN_HOST in html:
        signals.add("cdn_host")
    if SHOPIFY_CDN_PATH in html:
        signals.add("cdn_path")

    if SHOPIFY_SHOP_GLOBAL in html:
        signals.add("shop_global")
    if SHOPIFY_THEME_GLOBAL in html:
        signals.add("theme_global")

    if SHOPIFY_KEYWORD in html:
        signals.add("keyword")

    if ASSET_SCRIPT_RE.search(html) and SHOPIFY_ANYCASE_RE.search(html):
        signals.add("asset_script")

    if any(marker in html for marker in LIQUID_COMMENT_MARKERS):
        signals.add("liquid_comment")

    return signals


def detect_shopify(html: str | None) -> bool:
    return len(shopify_signals(html)) >= MIN_SHOPIFY_SIGNALS


def detect_features(html: str) -> DetectedFeatures:
    return DetectedFeatures(
        # Either marker alone shows up on plenty of legacy themes.
        section_schemas=SECTION_MARKER in html and SECTION_DATA_ATTR_MARKER in html,
        json_templates=JSON_SCRIPT_MARKER in html,
        css_utility_patterns=CSS_UTILITY_CLASS_RE.search(html) is not None,
        accessibility_attributes=ACCESSIBILITY_ATTR_RE.search(html) is not None,
    )


def detect_online_store_2(features: DetectedFeatures) -> bool:
    """Online Store 2.0 themes ship section schemas and JSON templates."""
    return features.section_schemas and features.json_templates


def dawn_like_score(html: str, features: DetectedFeatures) -> int:
    signals = [
        *(token in html for token in DAWN_CSS_TOKENS),
        *(token in html for token in DAWN_SECTION_TOKENS),
        features.accessibility_attributes and ARIA_PREFIX in html,
        MEDIA_WRAPPER_TOKEN in html,
        COLOR_CLASS_RE.search(html) is not None,
    ]
    return sum(1 for s in signals if s)


def _band_for(score: int) -> ThemeArchitecture:
    if score >= DAWN_LIKE_MIN_SCORE:
        return "dawn-like"
    if score >= CUSTOM_MIN_SCORE:
        return "custom"
    return "unknown"


def detect_theme_architecture(html: str, features: DetectedFeatures) -> ThemeArchitecture:
    """Classify how closely the markup follows Dawn conventions.

    This is resemblance, not attribution: forks and renamed copies of Dawn
    are everywhere, so the result never claims a specific base theme.
    """
    return _band_for(dawn_like_score(html, features))


def app_signals(html: str) -> set[str]:
    signals = {token for token in APP_VENDOR_TOKENS if token in html}

    hosts = {m.group(0).lower() for m in APP_SUBDOMAIN_RE.finditer(html)}
    if len(hosts) >= APP_SUBDOMAIN_MIN_HOSTS:
        signals.add("app_subdomains")

    return signals


def detect_app_heavy(html: str) -> bool:
    return len(app_signals(html)) >= APP_HEAVY_MIN_SIGNALS


def extract_shopify_version(html: str) -> str | None:
    m = THEME_VERSION_RE.search(html)
    return m.group(1) if m else None


def generate_warnings(features: DetectedFeatures, app_heavy: bool) -> list[str]:
    warnings: list[str] = []

    if not features.section_schemas:
        warnings.append(LEGACY_THEME_WARNING)

    if app_heavy:
        warnings.append(APP_HEAVY_WARNING)

    if not features.accessibility_attributes:
        warnings.append(LOW_ACCESSIBILITY_WARNING)

    return warnings
