"""
Probe strings, patterns and thresholds for storefront detection.

These were tuned by hand against live Shopify storefronts. There is no
labelled dataset behind them, so any change here is a behaviour change and
needs its own fixtures in tests/.
"""
from __future__ import annotations

import re

# =============================================================================
# Platform fingerprints
# =============================================================================
SHOPIFY_CDN_HOST = "cdn.shopify.com"
SHOPIFY_CDN_PATH = "/cdn/shop/"
SHOPIFY_SHOP_GLOBAL = "Shopify.shop"
SHOPIFY_THEME_GLOBAL = "Shopify.theme"
SHOPIFY_KEYWORD = "Shopify"
LIQUID_COMMENT_MARKERS: tuple[str, ...] = ("{% comment %}", "<!-- BEGIN theme-check")

ASSET_SCRIPT_RE = re.compile(r"/assets/.*\.js")
SHOPIFY_ANYCASE_RE = re.compile(r"shopify", re.IGNORECASE)

# A bare mention of the platform name is common on unrelated pages.
MIN_SHOPIFY_SIGNALS = 2

# =============================================================================
# Feature markers
# =============================================================================
SECTION_MARKER = "shopify-section"
SECTION_DATA_ATTR_MARKER = "data-section-"
JSON_SCRIPT_MARKER = 'type="application/json"'
CSS_UTILITY_CLASS_RE = re.compile(r'class="[^"]*(?:color-|gradient|page-width|section-)')
ACCESSIBILITY_ATTR_RE = re.compile(r"aria-|role=")

# =============================================================================
# Dawn-like conventions
# =============================================================================
DAWN_CSS_TOKENS: tuple[str, ...] = ("color-scheme", "gradient", "page-width")
DAWN_SECTION_TOKENS: tuple[str, ...] = ("section-template", "shopify-section")
ARIA_PREFIX = "aria-"
MEDIA_WRAPPER_TOKEN = "media-wrapper"
COLOR_CLASS_RE = re.compile(r'class="[^"]*color-')

DAWN_LIKE_MIN_SCORE = 5
CUSTOM_MIN_SCORE = 2

# =============================================================================
# Third-party apps
# =============================================================================
APP_VENDOR_TOKENS: tuple[str, ...] = (
    "judge.me",   # reviews
    "klaviyo",    # email marketing
    "loox",       # reviews
    "yotpo",      # reviews
    "gorgias",    # support chat
    "tidio",      # support chat
)
APP_SUBDOMAIN_RE = re.compile(r"\bapp\.[-\w]+\.com", re.ASCII)
APP_SUBDOMAIN_MIN_HOSTS = 4
APP_HEAVY_MIN_SIGNALS = 2

# =============================================================================
# Version
# =============================================================================
THEME_VERSION_RE = re.compile(r'Shopify\.theme\s*=\s*\{[^}]*"version":\s*"([^"]+)"')

# =============================================================================
# Messages
# =============================================================================
NOT_SHOPIFY_ERROR = "Not a Shopify store"
LEGACY_THEME_WARNING = "Legacy theme detected - may not support all OS 2.0 features"
APP_HEAVY_WARNING = "App-heavy store - some functionality may be app-dependent"
LOW_ACCESSIBILITY_WARNING = "Limited accessibility attributes detected"
