"""
Shared HTML fixtures for the storefront detection test suite.
"""
import asyncio

import httpx
import pytest

from storeprobe_agent.validator import validate_and_detect


# ==========================================================================
# Page builders
# ==========================================================================

# Two platform probes (CDN host + theme global), nothing else.
SHOPIFY_HEAD = (
    '<link rel="stylesheet" href="https://cdn.shopify.com/s/files/1/0001/base.css">'
    "<script>Shopify.theme = {};</script>"
)


def page(head: str = "", body: str = "") -> str:
    return f"<!doctype html><html><head>{head}</head><body>{body}</body></html>"


def shopify_page(extra_head: str = "", body: str = "") -> str:
    return page(SHOPIFY_HEAD + extra_head, body)


def style_tokens(*tokens: str) -> str:
    """Dawn class names as bare CSS selectors, outside any class attribute."""
    rules = "".join(f".{t}{{margin:0}}" for t in tokens)
    return f"<style>{rules}</style>"


def vendor_scripts(*hosts: str) -> str:
    return "".join(f'<script src="https://{h}/loader.js"></script>' for h in hosts)


# ==========================================================================
# Fetch helpers
# ==========================================================================

def run_validate(url: str, handler, **kwargs):
    async def _run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await validate_and_detect(url, client=client, **kwargs)

    return asyncio.run(_run())


def html_handler(html: str, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=html, headers={"content-type": "text/html"})

    return handler


# ==========================================================================
# Scenario pages
# ==========================================================================

@pytest.fixture
def plain_html():
    return page(
        "<title>Corner Bakery</title>",
        "<h1>Fresh bread daily</h1><p>Call us to order.</p>",
    )


@pytest.fixture
def legacy_store_html():
    return page(
        '<script src="https://cdn.shopify.com/s/files/1/0001/theme.css"></script>'
        '<script>Shopify.shop = "legacy-demo.myshopify.com";</script>',
        "<h1>Legacy store</h1><div class=\"product\">Mug</div>",
    )


@pytest.fixture
def dawn_store_html():
    head = (
        '<script src="https://cdn.shopify.com/s/files/1/0001/t/1/assets/global.js"></script>'
        '<script>Shopify.shop = "dawn-demo.myshopify.com";'
        'Shopify.theme = {"name":"Dawn","id":1234,"version":"12.0.0"};</script>'
        '<script type="application/json" id="shopify-features">{"accessToken":"abc"}</script>'
        + vendor_scripts("cdn.judge.me", "static.klaviyo.com", "cdn-widgetsrepository.yotpo.com")
    )
    body = (
        '<div id="shopify-section-main" class="shopify-section section-template" '
        'data-section-id="main" data-section-type="main-product">'
        '<div class="page-width color-scheme-1">'
        '<button type="button" aria-label="Open cart" role="button">Cart</button>'
        "</div></div>"
    )
    return page(head, body)
