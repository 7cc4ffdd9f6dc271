"""Extract ``<img>`` tags from embedded HTML blocks.

Only images are meaningful in a Slack message; every other tag in an HTML
block is ignored.  The fragment is parsed with BeautifulSoup's built-in
``html.parser`` backend, so unclosed ``<img src="...">`` tags work as
well as self-closing ones.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, ParserRejectedMarkup

from slackify.blocks import image
from slackify.converter.context import BuildContext
from slackify.errors import ErrorCode, SlackifyHTMLParseError
from slackify.observability import get_logger, log_event

log = get_logger("slackify.converter.html")


def extract_images(raw: str) -> list[dict[str, str | None]]:
    """Return ``{"src": ..., "alt": ...}`` for every ``<img>`` in *raw*.

    Raises
    ------
    SlackifyHTMLParseError
        If the fragment cannot be parsed.
    """
    try:
        soup = BeautifulSoup(raw, "html.parser")
    except (ParserRejectedMarkup, AssertionError, ValueError) as exc:
        raise SlackifyHTMLParseError(
            message=f"HTML fragment could not be parsed: {exc}",
            context={"raw": raw[:200]},
            cause=exc,
        ) from exc

    return [
        {"src": tag.get("src"), "alt": tag.get("alt")}
        for tag in soup.find_all("img")
    ]


def build_html_block(token: dict, ctx: BuildContext) -> list[dict]:
    """Convert an HTML block into one image block per ``<img>`` tag."""
    raw = token.get("raw", "")
    try:
        tags = extract_images(raw)
    except SlackifyHTMLParseError as exc:
        log_event(log, logging.WARNING, "HTML block skipped", op="html", error=exc.message)
        ctx.add_warning(ErrorCode.HTML_PARSE_ERROR.value, exc.message, **exc.context)
        return []

    blocks: list[dict] = []
    for tag in tags:
        src = tag["src"]
        if not src:
            ctx.add_warning(
                "HTML_IMAGE_NO_SRC",
                "<img> tag without src was skipped.",
                raw=raw[:200],
            )
            continue
        blocks.append(image(src, tag["alt"] or src))
    return blocks
