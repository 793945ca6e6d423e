"""MCP server exposing the hysteria filter as tools."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP, Context

from hysteria_filter.config import Config
from hysteria_filter.filter import is_hysteria as _is_hysteria
from hysteria_filter.filter import remove_hysteria as _remove_hysteria

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    config: Config


@asynccontextmanager
async def app_lifespan(server: FastMCP):
    """Build the server config once per run."""
    yield AppContext(config=Config())


mcp = FastMCP(
    "hysteria-filter",
    lifespan=app_lifespan,
)


def _get_app(ctx: Context) -> AppContext:
    """Extract AppContext from lifespan context."""
    return ctx.request_context.lifespan_context


def _label(proxy) -> str:
    """Best human-readable label for a record in log lines."""
    if isinstance(proxy, dict):
        return str(proxy.get("name") or proxy.get("type") or "<unnamed>")
    return "<unnamed>"


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def remove_hysteria(
    proxies: list[dict],
    ctx: Context = None,
) -> dict:
    """Remove hysteria proxies from a list of proxy records.

    A record is removed when its 'type' or 'name' contains "hysteria"
    (case-insensitive). Records with neither field are kept. Order is
    preserved and records are returned unchanged.

    Args:
        proxies: Proxy records, e.g. the 'proxies' list of a Clash config.

    Returns structured data:
        proxies, removed, kept
    """
    app = _get_app(ctx)

    if len(proxies) > app.config.max_records:
        return {
            "error": f"Too many records: {len(proxies)} (max {app.config.max_records})",
            "proxies": [],
        }

    try:
        kept = _remove_hysteria(proxies)
    except Exception as e:
        logger.error("remove_hysteria failed: %s", e, exc_info=True)
        return {"error": str(e), "proxies": []}

    removed = len(proxies) - len(kept)
    if app.config.log_removed and removed:
        for proxy in proxies:
            if _is_hysteria(proxy):
                logger.info("Dropped hysteria proxy: %s", _label(proxy))

    return {"proxies": kept, "removed": removed, "kept": len(kept)}


@mcp.tool()
async def is_hysteria(
    proxy: dict,
    ctx: Context = None,
) -> dict:
    """Check whether a single proxy record would be removed.

    Args:
        proxy: One proxy record.

    Returns:
        hysteria flag for the record.
    """
    return {"hysteria": _is_hysteria(proxy)}
