"""
Company page fetch and fact extraction for blog generation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx
from bs4 import BeautifulSoup

from core import config

USER_AGENT = "Mozilla/5.0 (compatible; CompanyBlogger/1.0)"
MAX_PARAGRAPHS = 60

_EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)


class ScrapeError(RuntimeError):
    pass


@dataclass
class ScrapedPage:
    brand_name: str
    email: str | None
    content: str


async def fetch_html(url: str, *, timeout_s: float | None = None) -> str:
    try:
        async with httpx.AsyncClient(
            timeout=timeout_s if timeout_s is not None else config.scrape_timeout_s(),
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        ) as client:
            resp = await client.get(url)
    except httpx.HTTPError as exc:
        raise ScrapeError(str(exc) or exc.__class__.__name__) from exc

    if resp.status_code < 200 or resp.status_code >= 300:
        raise ScrapeError(f"HTTP {resp.status_code} fetching {url}")
    return resp.text


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return ""
    return str(tag.get("content") or "").strip()


def _brand_name(soup: BeautifulSoup, url: str) -> str:
    name = _meta_content(soup, property="og:site_name") or _meta_content(soup, property="og:title")
    if not name and soup.title is not None:
        name = soup.title.get_text().strip()
    if name:
        return name
    host = urlsplit(url).hostname
    return re.sub(r"^www\.", "", host) if host else url


def _email(soup: BeautifulSoup) -> str | None:
    anchors = soup.select('a[href^="mailto:"]')
    if not anchors:
        match = _EMAIL_RE.search(soup.get_text(" "))
        return match.group(0) if match else None

    # A page with mailto links never falls back to scanning the text.
    for anchor in anchors:
        href = str(anchor.get("href") or "")
        candidate = re.sub(r"^mailto:", "", href, flags=re.IGNORECASE).split("?")[0].strip()
        if candidate:
            return candidate
    return None


def extract_from_html(html: str, url: str) -> ScrapedPage:
    soup = BeautifulSoup(html or "", "html.parser")

    paragraphs = [p.get_text().strip() for p in soup.find_all("p", limit=MAX_PARAGRAPHS)]
    description = _meta_content(soup, name="description") or _meta_content(soup, property="og:description")
    content = "\n\n".join(part for part in [description, "\n\n".join(p for p in paragraphs if p)] if part)

    return ScrapedPage(brand_name=_brand_name(soup, url), email=_email(soup), content=content)
