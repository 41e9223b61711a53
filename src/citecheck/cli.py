#!/usr/bin/env python
"""CLI for checking foreign-press citations in Korean news."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from citecheck.config import create_from_config, load_config, load_default_config
from citecheck.data import ArticleSummary, WorkflowState
from citecheck.workflow import CitationCheckSession

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["search", "url"]
    config: Path | None = None
    keywords: str | None = None
    start: str | None = None
    end: str | None = None
    publisher: str = ""
    must_cite: bool = False
    select: int | None = None
    url: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("select")
    @classmethod
    def select_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError("--select is 1-based")
        return v


def format_article(index: int, article: ArticleSummary, selected_url: str | None) -> str:
    marker = "*" if article.url and article.url == selected_url else " "
    lines = [f"{marker}{index}. {article.title}"]
    meta = article.publisher
    if article.published_date:
        meta = f"{meta} ({article.published_date})" if meta else article.published_date
    if meta:
        lines.append(f"    {meta}")
    if article.url:
        lines.append(f"    {article.url}")
    if article.summary:
        lines.append(f"    {article.summary}")
    return "\n".join(lines)


def format_analysis(state: WorkflowState) -> str:
    """Render the analysis panel for the current state."""
    if state.error:
        return f"Error: {state.error}"
    if state.selected is None:
        return "No article selected."

    lines = [f"Article: {state.selected.title}"]
    result = state.analysis
    if result is None or result.citation is None:
        lines.append("No foreign-press citation found in this article.")
        return "\n".join(lines)

    lines.append(f"Citation ({result.citation.source}): \"{result.citation.quote}\"")
    original = result.original_article
    if original is None:
        lines.append("Original article could not be found.")
    else:
        lines.append(f"Original: {original.title}")
        lines.append(f"  {original.url}")
        lines.append(f"  {original.snippet}")

    if result.evaluation is not None:
        evaluation = result.evaluation
        lines.append(f"Score: {evaluation.score:.1f}/5 ({evaluation.rating})")
        lines.append(evaluation.summary)
    return "\n".join(lines)


async def ensure_credential(session: CitationCheckSession) -> bool:
    if await session.check_credential():
        return True
    await session.select_credential()
    return await session.check_credential()


async def run(args: CLIArgs) -> int:
    """Execute one search or URL check and print the result.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config) if args.config else load_default_config()
    logging.getLogger().setLevel(config.logging.level)
    session, gateway = create_from_config(config)

    if not await ensure_credential(session):
        logger.error("An API key is required.")
        return 1

    params = session.state.params
    if args.command == "url":
        params.article_url = args.url or ""
        await session.analyze_url()
    else:
        if args.keywords:
            params.keywords = args.keywords
        if args.start:
            params.start_date = args.start
        if args.end:
            params.end_date = args.end
        params.publisher = args.publisher
        params.must_cite = args.must_cite

        logger.info(f"Searching {params.keywords!r} from {params.start_date} to {params.end_date}")
        await session.search()
        if session.state.error:
            print(f"Error: {session.state.error}")
            return 1

        articles = session.state.articles
        print(f"\nFound {len(articles)} articles:\n")
        for i, article in enumerate(articles, 1):
            print(format_article(i, article, session.state.selected_url))

        if args.select is None:
            return 0
        if args.select > len(articles):
            logger.error(f"--select {args.select} is out of range")
            return 1
        await session.select_article(articles[args.select - 1])

    print()
    print(format_analysis(session.state))

    usage = gateway.usage
    logger.info("\n--- Usage Summary ---")
    logger.info(f"API calls: {len(usage.api_calls)}")
    logger.info(f"Input tokens: {usage.input_tokens:,}")
    logger.info(f"Output tokens: {usage.output_tokens:,}")
    if usage.web_searches:
        logger.info(f"Web searches: {usage.web_searches}")

    return 1 if session.state.error else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check how Korean news articles cite foreign press."
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml, else built-in defaults)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search articles by keyword")
    search.add_argument("keywords", nargs="?", help="Search keywords")
    search.add_argument("--start", help="Start date (YYYY-MM-DD)")
    search.add_argument("--end", help="End date (YYYY-MM-DD)")
    search.add_argument("--publisher", default="", help="Restrict to one publisher")
    search.add_argument(
        "--must-cite",
        action="store_true",
        default=False,
        help="Only articles that cite foreign press",
    )
    search.add_argument("--select", type=int, help="Analyze the N-th result (1-based)")

    url = sub.add_parser("url", help="Extract and analyze the article at a URL")
    url.add_argument("url", help="Article URL")
    return parser


def main() -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()

    try:
        args = CLIArgs(
            command=ns.command,
            config=ns.config,
            keywords=getattr(ns, "keywords", None),
            start=getattr(ns, "start", None),
            end=getattr(ns, "end", None),
            publisher=getattr(ns, "publisher", ""),
            must_cite=getattr(ns, "must_cite", False),
            select=getattr(ns, "select", None),
            url=getattr(ns, "url", None),
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        sys.exit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
