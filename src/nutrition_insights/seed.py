"""Command-line entry point that reseeds the record store."""

import logging

from nutrition_insights.app_logging import configure_logging
from nutrition_insights.containers import build_container

_logger = logging.getLogger(__name__)


def main() -> int:
    """Replace both collections with the demo dataset."""
    configure_logging()
    try:
        container = build_container()
        result = container.seed_service.seed()
    except Exception:
        _logger.exception("Seeding failed")
        return 1
    print(
        f"Nutritional Insights: seeded {result.profiles} nutrition profiles "
        f"and {result.recipes} recipes"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
