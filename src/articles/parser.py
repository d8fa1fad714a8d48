"""Clients for the content-parsing service."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import requests
import trafilatura
from lxml import html as lxml_html
from readability import Document

from articles.errors import ExtractionFailed
from articles.models import ParsedArticle

if TYPE_CHECKING:
    from common.config import ParserConfig

logger = logging.getLogger(__name__)

USER_AGENT = "binder/1.0 (read-it-later)"


class ContentParser(ABC):
    """Extracts readable title, byline and text from an article URL."""

    @abstractmethod
    def parse(self, url: str) -> ParsedArticle:
        """
        Parse the article at url.

        Raises:
            ExtractionFailed: On transport or parse failure.
        """


class HttpContentParser(ContentParser):
    """Calls a Readability parsing service over HTTPS/JSON."""

    def __init__(self, endpoint: str, timeout: int = 30, session: Optional[requests.Session] = None):
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    def parse(self, url: str) -> ParsedArticle:
        logger.info("Requesting parse of %s from %s", url, self.endpoint)
        try:
            response = self.session.post(
                self.endpoint,
                json={"articleUrl": url},
                timeout=self.timeout,
                headers={"User-Agent": USER_AGENT},
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise ExtractionFailed(f"Content parser request failed for {url}: {exc}") from exc
        except ValueError as exc:
            raise ExtractionFailed(f"Content parser returned invalid JSON for {url}") from exc

        if data is not None and not isinstance(data, dict):
            raise ExtractionFailed(f"Content parser returned unexpected payload for {url}")
        return ParsedArticle.from_response(data)


class LocalContentParser(ContentParser):
    """
    Fetches and parses articles in-process.

    Order:
    1. trafilatura (metadata and text)
    2. readability-lxml (title and main content)
    """

    def __init__(self, timeout: int = 10):
        self.timeout = timeout

    def parse(self, url: str) -> ParsedArticle:
        try:
            response = requests.get(url, timeout=self.timeout, headers={"User-Agent": USER_AGENT})
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ExtractionFailed(f"Failed to fetch {url}: {exc}") from exc

        page = response.text
        try:
            parsed = parse_with_trafilatura(page)
            if parsed.full_text:
                return parsed
        except Exception as e:
            logger.warning("trafilatura failed for %s: %s", url, e)

        try:
            return parse_with_readability(page)
        except Exception as exc:
            raise ExtractionFailed(f"Failed to parse {url}: {exc}") from exc


def parse_with_trafilatura(page: str) -> ParsedArticle:
    metadata = trafilatura.extract_metadata(page)
    text = trafilatura.extract(page)
    return ParsedArticle(
        title=getattr(metadata, "title", None),
        byline=getattr(metadata, "author", None),
        text_content=text,
        length=len(text) if text else None,
        excerpt=getattr(metadata, "description", None),
        site_name=getattr(metadata, "sitename", None),
    )


def parse_with_readability(page: str) -> ParsedArticle:
    doc = Document(page)
    summary_html = doc.summary()

    tree = lxml_html.fromstring(summary_html)
    lines = [line.strip() for line in tree.text_content().splitlines() if line.strip()]
    text = "\n".join(lines) if lines else None

    return ParsedArticle(
        title=doc.short_title() or None,
        content=summary_html if text else None,
        text_content=text,
        length=len(text) if text else None,
    )


def get_content_parser(config: ParserConfig) -> ContentParser:
    """Create the content parser for the configured mode."""
    if config.mode == "local":
        return LocalContentParser(timeout=config.timeout_seconds)
    if not config.endpoint:
        raise ValueError("Content parser endpoint is required. Set CONTENT_PARSER_URL.")
    return HttpContentParser(config.endpoint, timeout=config.timeout_seconds)
