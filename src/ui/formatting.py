"""Markdown and plain-text rendering for chat bubbles."""

import html
import xml.etree.ElementTree as etree
from urllib.parse import urlparse

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

SAFE_URL_SCHEMES = frozenset({"http", "https", "mailto"})
URL_ATTRIBUTES = ("href", "src")


def is_safe_url(url: str) -> bool:
    """True for relative URLs and http, https or mailto links."""
    # Browsers ignore whitespace and control characters inside a scheme
    compact = "".join(ch for ch in url if ch > " ")
    scheme = urlparse(compact).scheme.lower()
    return not scheme or scheme in SAFE_URL_SCHEMES


class SafeLinkTreeprocessor(Treeprocessor):
    """Drops href/src attributes whose scheme could run script."""

    def run(self, root: etree.Element) -> None:
        for element in root.iter():
            for attribute in URL_ATTRIBUTES:
                url = element.get(attribute)
                if url is not None and not is_safe_url(url):
                    del element.attrib[attribute]


class SafeLinkExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # After "inline" (20) has built the links
        md.treeprocessors.register(SafeLinkTreeprocessor(md), "safe_links", 5)


MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists", "nl2br", SafeLinkExtension()]


def markdown_to_html(text: str) -> str:
    """Convert model output from markdown to HTML for chat display.

    Supports GitHub-style tables and fenced code blocks. Raw HTML in the
    source is escaped and shown as text, and links or images using schemes
    other than http, https and mailto lose their target.
    """
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, output_format="html")
    # Drop raw HTML handling so tags fall through as escaped text
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    return md.convert(text)


def plain_text_to_html(text: str) -> str:
    """Escape user text and keep its line breaks."""
    return html.escape(text).replace("\n", "<br>")
