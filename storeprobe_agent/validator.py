"""
URL validation and Shopify platform detection.

Fetches a page once and classifies it from the raw HTML: whether it is a
Shopify storefront, whether the theme is Online Store 2.0, how closely it
follows Dawn conventions and whether it leans on third-party apps.
"""
from __future__ import annotations

import logging

import httpx

from . import fetcher
from .detectors import (
    detect_app_heavy,
    detect_features,
    detect_online_store_2,
    detect_shopify,
    detect_theme_architecture,
    extract_shopify_version,
    generate_warnings,
)
from .exceptions import StoreProbeError
from .fingerprints import NOT_SHOPIFY_ERROR
from .models import DetectedFeatures, ValidationResult
from .settings import DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


def failed_result(message: str) -> ValidationResult:
    return ValidationResult(
        is_shopify=False,
        is_online_store_2=False,
        theme_architecture="unknown",
        app_heavy=False,
        detected_features=DetectedFeatures(),
        error=message,
        warnings=[],
    )


def evaluate_html(html: str) -> ValidationResult:
    if not detect_shopify(html):
        return failed_result(NOT_SHOPIFY_ERROR)

    features = detect_features(html)
    app_heavy = detect_app_heavy(html)

    result = ValidationResult(
        is_shopify=True,
        is_online_store_2=detect_online_store_2(features),
        theme_architecture=detect_theme_architecture(html, features),
        app_heavy=app_heavy,
        detected_features=features,
        shopify_version=extract_shopify_version(html),
        warnings=generate_warnings(features, app_heavy),
    )
    logger.debug(
        "Classified storefront: os2=%s theme=%s app_heavy=%s",
        result.is_online_store_2,
        result.theme_architecture,
        result.app_heavy,
    )
    return result


async def validate_and_detect(
    url: str,
    *,
    timeout_ms: int | None = None,
    user_agent: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> ValidationResult:
    """Validate ``url`` and detect its storefront characteristics.

    Never raises for bad input or network trouble; those come back as a
    result with ``error`` set and every flag cleared.
    """
    try:
        html = await fetcher.fetch_html(
            url,
            timeout_ms=timeout_ms or DEFAULT_TIMEOUT_MS,
            user_agent=user_agent or DEFAULT_USER_AGENT,
            client=client,
        )
    except StoreProbeError as e:
        return failed_result(str(e))

    result = evaluate_html(html)
    logger.info("Validated %s: is_shopify=%s", url, result.is_shopify)
    return result
