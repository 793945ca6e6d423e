"""Entry point: python -m hysteria_filter"""

import logging


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    from hysteria_filter.server import mcp

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
