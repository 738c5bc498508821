"""Result slot tracking the lifecycle of on-demand analysis requests."""
import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, Optional
from pydantic import BaseModel, Field
from stockdash.analysis.pipeline import PipelineError

logger = logging.getLogger(__name__)


class SlotStatus(str, Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SlotSnapshot(BaseModel):
    """Point-in-time view of an analysis slot."""
    status: SlotStatus = Field(..., description="Lifecycle state of the last request")
    result: Optional[str] = Field(None, description="Text of the last successful request")
    error: Optional[str] = Field(None, description="User-facing message of the last failure")
    superseded: bool = Field(False, description="True if this request was replaced by a newer one")
    updated_at: Optional[datetime] = Field(None, description="When the slot last changed")


class AnalysisSlot:
    """
    Holds the most recent result of one kind of analysis.
    
    Lifecycle: idle -> in_progress -> succeeded | failed. Every new request
    resets the slot to in_progress and cancels the request still in flight,
    so the most recently issued request is the only one allowed to write its
    outcome.
    """
    
    def __init__(self, name: str, failure_message: str):
        """
        Initialize an empty slot.
        
        Args:
            name: Slot name used in logs
            failure_message: Localized message stored when a request fails
        """
        self.name = name
        self.failure_message = failure_message
        self.status = SlotStatus.IDLE
        self.result: Optional[str] = None
        self.error: Optional[str] = None
        self.updated_at: Optional[datetime] = None
        self._task: Optional[asyncio.Task] = None
        self._generation = 0
    
    @property
    def in_progress(self) -> bool:
        return self.status == SlotStatus.IN_PROGRESS
    
    def snapshot(self, superseded: bool = False) -> SlotSnapshot:
        return SlotSnapshot(
            status=self.status,
            result=self.result,
            error=self.error,
            superseded=superseded,
            updated_at=self.updated_at
        )
    
    def _set(self, status: SlotStatus, result: Optional[str] = None, error: Optional[str] = None):
        self.status = status
        self.result = result
        self.error = error
        self.updated_at = datetime.now(timezone.utc)
    
    async def run(self, operation: Callable[[], Awaitable[str]]) -> SlotSnapshot:
        """
        Run an analysis and record its outcome in the slot.
        
        Args:
            operation: Zero-argument coroutine function performing the remote call
            
        Returns:
            Snapshot after completion. A request cancelled because a newer one
            was issued returns the current slot state with ``superseded`` set.
        """
        if self._task is not None and not self._task.done():
            logger.info("Cancelling superseded %s request", self.name)
            self._task.cancel()
        
        self._generation += 1
        generation = self._generation
        self._set(SlotStatus.IN_PROGRESS)
        
        task = asyncio.ensure_future(operation())
        self._task = task
        try:
            text = await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            caller_cancelled = current is not None and current.cancelling() > 0
            if generation != self._generation and not caller_cancelled:
                return self.snapshot(superseded=True)
            if generation == self._generation:
                # The caller itself went away; nothing is running anymore.
                self._set(SlotStatus.IDLE)
            raise
        except PipelineError as e:
            if generation != self._generation:
                return self.snapshot(superseded=True)
            logger.warning("%s request failed: %s", self.name, e)
            self._set(SlotStatus.FAILED, error=self.failure_message)
        except Exception:
            if generation == self._generation:
                self._set(SlotStatus.FAILED, error=self.failure_message)
            raise
        else:
            if generation != self._generation:
                return self.snapshot(superseded=True)
            self._set(SlotStatus.SUCCEEDED, result=text)
        finally:
            if self._task is task:
                self._task = None
        
        return self.snapshot()
