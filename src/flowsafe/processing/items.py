"""Fault-isolating processing loop over workflow input items.

Each item is a mapping with a ``json`` payload and an optional ``binary``
payload. A failing item is turned into an error record and the loop moves
on; a failure outside the per-item handling turns the whole run into a
single error record. ``run`` never raises.
"""

import logging
import traceback
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from flowsafe.config.schema import ProcessingConfig
from flowsafe.normalize.inputs import InputSource, safe_input_all

logger = logging.getLogger(__name__)

ItemHandler = Callable[[dict, int], Mapping]


class ProcessingStage(Enum):
    """Outcome recorded on every output record."""

    COMPLETED = "completed"
    NO_INPUT = "no_input"
    ITEM_FAILED = "item_failed"
    GLOBAL_FAILED = "global_failed"


def _identity(payload: dict, index: int) -> Mapping:
    return payload


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ItemProcessor:
    """Applies a handler to every input item without letting one item break the run."""

    def __init__(
        self,
        handler: ItemHandler | None = None,
        config: ProcessingConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.handler = handler or _identity
        self.config = config or ProcessingConfig()
        self.clock = clock or _utc_now

    def _timestamp(self) -> str:
        return self.clock().isoformat()

    def run(self, source: InputSource) -> list[dict]:
        """Process every item from ``source`` and return the output records."""
        try:
            items = safe_input_all(source)
            logger.info(f"Processing {len(items)} input item(s)")

            if not items:
                logger.warning("No input data")
                return [
                    {
                        "json": {
                            "error": "No input data",
                            "processing_stage": ProcessingStage.NO_INPUT.value,
                            "timestamp": self._timestamp(),
                        }
                    }
                ]

            results = []
            for index, item in enumerate(items, start=1):
                if item is None and self.config.skip_empty_items:
                    logger.warning(f"Item {index} is empty, skipping")
                    continue
                results.append(self._process_item(item, index))

            logger.info(f"Processing finished, {len(results)} record(s) produced")
            return results

        except Exception as e:
            logger.error(f"Processing failed: {e}")
            return [self._global_failure(source, e)]

    def _process_item(self, item: Any, index: int) -> dict:
        """Run the handler on one item, converting failures into an error record."""
        try:
            if not isinstance(item, Mapping):
                raise TypeError(f"Item must be a mapping, got {type(item).__name__}")

            payload = item.get("json")
            if payload is None:
                logger.debug(f"Item {index} has no json payload, initialized to empty")
                payload = {}
            elif not isinstance(payload, Mapping):
                raise TypeError(f"Item json must be a mapping, got {type(payload).__name__}")

            processed = dict(self.handler(dict(payload), index))
            processed.update(
                {
                    "processed_at": self._timestamp(),
                    "processing_stage": ProcessingStage.COMPLETED.value,
                    "processing_index": index,
                }
            )
            logger.debug(f"Item {index} processed")
            return {"json": processed, "binary": item.get("binary") or {}}

        except Exception as e:
            logger.error(f"Item {index} failed: {e}")
            return self._item_failure(item, index, e)

    def _item_failure(self, item: Any, index: int, error: Exception) -> dict:
        original = item.get("json") if isinstance(item, Mapping) else None
        record = {
            "error": "Item processing failed",
            "error_message": str(error),
            "error_type": type(error).__name__,
            "original_data": original if isinstance(original, Mapping) else {},
            "processing_stage": ProcessingStage.ITEM_FAILED.value,
            "processing_index": index,
            "timestamp": self._timestamp(),
        }
        if self.config.include_error_stack:
            record["error_stack"] = "".join(traceback.format_exception(error))
        binary = item.get("binary") if isinstance(item, Mapping) else None
        return {"json": record, "binary": binary or {}}

    def _global_failure(self, source: InputSource, error: Exception) -> dict:
        record = {
            "error": "Processing failed",
            "error_message": str(error),
            "error_type": type(error).__name__,
            "processing_stage": ProcessingStage.GLOBAL_FAILED.value,
            "timestamp": self._safe_timestamp(),
            "debug_info": {
                "input_type": type(source).__name__,
                "input_preview": self._preview(source),
            },
        }
        if self.config.include_error_stack:
            record["error_stack"] = "".join(traceback.format_exception(error))
        return {"json": record}

    def _safe_timestamp(self) -> str | None:
        try:
            return self._timestamp()
        except Exception:
            return None

    def _preview(self, source: InputSource) -> str:
        try:
            text = repr(source)
        except Exception:
            text = f"<unrepresentable {type(source).__name__}>"
        return text[: self.config.preview_chars]
