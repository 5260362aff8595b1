"""Contract event consumer.

Whatever watches the chain puts ContractEvent objects on an asyncio.Queue;
consume() turns each into a Viking until it receives None. Generation is
blocking (Pillow + file I/O) so it runs in a worker thread. Duplicates and
per-event failures are logged and skipped; there is no retry.
"""

import asyncio
import logging

from pydantic import BaseModel

from vikings.errors import DuplicateVikingError, VikingError
from vikings.pipeline import generate_viking
from vikings.settings import Settings
from vikings.specification import RawTraitInput

logger = logging.getLogger(__name__)


class ContractEvent(BaseModel):
    number: int
    payload: RawTraitInput


async def consume(queue: "asyncio.Queue[ContractEvent | None]", settings: Settings) -> list[int]:
    """Process events until the None sentinel. Returns the numbers generated."""
    generated: list[int] = []
    while True:
        event = await queue.get()
        try:
            if event is None:
                return generated
            logger.info("VikingGenerated: %d", event.number)
            try:
                await asyncio.to_thread(generate_viking, event.number, event.payload, settings)
            except DuplicateVikingError:
                logger.info("viking %d already exists, skipping", event.number)
                continue
            except VikingError as e:
                logger.warning("viking %d failed: %s", event.number, e)
                continue
            generated.append(event.number)
        finally:
            queue.task_done()
