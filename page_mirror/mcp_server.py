"""MCP server exposing the page mirror as a tool."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import MirrorConfig, default_output_root
from .mirror import mirror_page
from .models import MirrorError, MirrorSummary

logger = logging.getLogger("page_mirror.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="page-mirror")


def format_summary(summary: MirrorSummary) -> str:
    lines = [
        f"Mirrored {summary.target.href}",
        f"Output directory: {summary.output_dir}",
        f"Assets: {summary.succeeded}/{summary.total} downloaded, {summary.failed} failed",
    ]
    lines.extend(f"- failed {f.url}: {f.reason}" for f in summary.failures)
    return "\n".join(lines)


@mcp.tool()
async def mirror(
    url: str,
    output_dir: Optional[str] = None,
) -> str:
    """Download a page and its CSS, JS and images, rewriting it to use local copies."""
    output_root = (
        Path(output_dir).expanduser() if output_dir else default_output_root()
    )
    config = MirrorConfig(output_root=output_root)
    try:
        summary = await mirror_page(url, config)
    except MirrorError as exc:
        raise RuntimeError(str(exc)) from exc
    return format_summary(summary)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
