"""Blocking bridge that runs asynchronous handler work on a dedicated event loop.

The host calls handlers synchronously and may itself be running an event loop
on the calling thread. Work is therefore never awaited on the caller's thread:
one long-lived loop runs on a daemon thread owned by the bridge, and the caller
only blocks on the future returned for its coroutine. Host clients pool
connections per loop, so every call for the bridge's lifetime shares that loop.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Awaitable, Callable, TypeVar

from .errors import DispatchTimeoutError

_ResultT = TypeVar("_ResultT")


class AsyncWorkBridge:
    """Run coroutine factories to completion from synchronous callers."""

    def __init__(self, thread_name: str = "job-completion-handler-loop"):
        """Start the bridge event loop thread.

        Args:
            thread_name: Name of the daemon thread driving the event loop.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when thread_name is blank.
        """

        if not thread_name.strip():
            raise ValueError("thread_name must not be blank")
        self._loop = asyncio.new_event_loop()
        self._closed = False
        self._close_lock = threading.Lock()
        self._thread = threading.Thread(target=self._bridge_serve_loop, name=thread_name, daemon=True)
        self._thread.start()

    def bridge_run(
        self,
        coroutine_factory: Callable[[], Awaitable[_ResultT]],
        timeout_seconds: float | None = None,
        agent_id: str | None = None,
        client_machine: str | None = None,
        job_id: str | None = None,
    ) -> _ResultT:
        """Run one coroutine on the bridge loop and block until it finishes.

        When the timeout expires the work is cancelled, and this call returns
        only after the cancellation has completed.

        Args:
            coroutine_factory: Zero-argument callable creating the awaitable to run.
            timeout_seconds: Optional upper bound on the work.
            agent_id: Orchestrator agent identifier carried by timeout errors.
            client_machine: Orchestrator client machine carried by timeout errors.
            job_id: Job identifier carried by timeout errors.

        Returns:
            _ResultT: Value returned by the coroutine.

        Raises:
            DispatchTimeoutError: Raised when the work exceeds timeout_seconds.
            RuntimeError: Raised when the bridge is already closed.
            Exception: Any exception raised by the coroutine is re-raised unchanged.
        """

        with self._close_lock:
            if self._closed:
                raise RuntimeError("AsyncWorkBridge is closed")
            future = asyncio.run_coroutine_threadsafe(
                self._bridge_await_with_deadline(coroutine_factory, timeout_seconds),
                self._loop,
            )
        timed_out, result = future.result()
        if timed_out:
            raise DispatchTimeoutError(
                f"dispatched work did not finish within {timeout_seconds} seconds",
                agent_id=agent_id,
                client_machine=client_machine,
                job_id=job_id,
            )
        return result

    def bridge_close(self) -> None:
        """Cancel outstanding work, stop the loop and join its thread.

        Returns:
            None: Releases the loop thread as side effect.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        with self._close_lock:
            if self._closed:
                return
            self._closed = True

        asyncio.run_coroutine_threadsafe(self._bridge_cancel_pending(), self._loop).result()
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join()
        self._loop.close()

    def _bridge_serve_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    @staticmethod
    async def _bridge_await_with_deadline(
        coroutine_factory: Callable[[], Awaitable[_ResultT]],
        timeout_seconds: float | None,
    ) -> tuple[bool, _ResultT | None]:
        # A TimeoutError raised by the work itself propagates; only an expired deadline is reported.
        deadline = asyncio.timeout(timeout_seconds)
        try:
            async with deadline:
                return False, await coroutine_factory()
        except TimeoutError:
            if deadline.expired():
                return True, None
            raise

    @staticmethod
    async def _bridge_cancel_pending() -> None:
        pending = [task for task in asyncio.all_tasks() if task is not asyncio.current_task()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
