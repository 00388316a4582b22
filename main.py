"""Entry point for the headless carousel demo.

Runs a simulated carousel with autoplay and a couple of viewport changes,
logging every settled item. Configured through environment variables.
"""

import asyncio
import os

from carousel_engine.adapters import AsyncioScheduler, SimulatedTrack
from carousel_engine.core.carousel import Carousel
from carousel_engine.core.config import CarouselConfig
from carousel_engine.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
)

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)

ITEM_COUNT = int(os.getenv("CAROUSEL_ITEMS", "6"))
DEMO_SECONDS = float(os.getenv("DEMO_SECONDS", "6"))
# Viewport widths visited during the demo, one per third of the run
VIEWPORT_STEPS = (1280.0, 900.0, 480.0)


async def main() -> None:
    """Run the demo carousel until DEMO_SECONDS have elapsed."""
    config = CarouselConfig.load(
        items_per_view=int(os.getenv("CAROUSEL_ITEMS_PER_VIEW", "3")),
        gap_px=int(os.getenv("CAROUSEL_GAP_PX", "20")),
        autoplay=True,
        interval_ms=int(os.getenv("CAROUSEL_INTERVAL_MS", "800")),
        transition_duration_ms=int(os.getenv("CAROUSEL_TRANSITION_MS", "300")),
    )
    scheduler = AsyncioScheduler()
    track = SimulatedTrack(
        scheduler, container_width=VIEWPORT_STEPS[0], viewport_width=VIEWPORT_STEPS[0]
    )
    items = [f"item-{index}" for index in range(ITEM_COUNT)]
    bind_contextvars(page=os.getenv("DEMO_PAGE", "demo"))

    def on_settled(real_index: int) -> None:
        logger.info("demo_settled", real_index=real_index, item=items[real_index])

    carousel = Carousel(
        items,
        track,
        config=config,
        scheduler=scheduler,
        on_settled=on_settled,
        carousel_id="demo",
    )

    step = DEMO_SECONDS / len(VIEWPORT_STEPS)
    try:
        for width in VIEWPORT_STEPS[1:]:
            await asyncio.sleep(step)
            track.resize(width)
            carousel.handle_resize(width)
            logger.info("demo_resized", viewport_width=width)
        await asyncio.sleep(step)
    finally:
        carousel.destroy()
        clear_contextvars()


if __name__ == "__main__":
    asyncio.run(main())
