"""Debouncing on an asyncio event loop.

The pending firing is a ``TimerHandle`` from ``loop.call_later``, so
everything runs on the loop's own thread. Like other asyncio primitives these
objects are not thread safe; call them from the loop they are bound to.
"""
import asyncio
import functools
import logging

from .utils import check_operation, check_wait, describe, to_seconds

logger = logging.getLogger("debounced")


class LoopDebounced:
    def __init__(self, func, wait, loop=None):
        check_operation(func)
        check_wait(wait)
        functools.update_wrapper(self, func)
        self.wait = wait
        # bound lazily so module level decorators work outside a running loop
        self._loop = loop
        self._handle = None
        self._args = ()
        self._kwargs = {}
        # tasks started by firings, held until done so they are not collected
        self._tasks = set()

    @property
    def loop(self):
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args, **kwargs):
        loop = self.loop
        self._args = args
        self._kwargs = kwargs
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("superseding pending call to %s", describe(self.__wrapped__))
        # call_later(0, ...) still waits for the next loop iteration
        self._handle = loop.call_later(to_seconds(self.wait), self._fire)

    def _take(self):
        self._handle = None
        args, kwargs = self._args, self._kwargs
        self._args, self._kwargs = (), {}
        return args, kwargs

    def _run(self, args, kwargs):
        result = self.__wrapped__(*args, **kwargs)
        if asyncio.iscoroutine(result):
            task = self.loop.create_task(result)
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            return task
        return result

    def _fire(self):
        args, kwargs = self._take()
        logger.debug("firing %s", describe(self.__wrapped__))
        # exceptions raised here reach the loop's exception handler
        self._run(args, kwargs)

    def cancel(self):
        if self._handle is None:
            return
        self._handle.cancel()
        self._take()
        logger.debug("cancelled pending call to %s", describe(self.__wrapped__))

    def flush(self):
        """Run the pending call now.

        Returns the function's result, or the task wrapping it for coroutine
        functions. Returns None when nothing is pending.
        """
        if self._handle is None:
            return None
        self._handle.cancel()
        args, kwargs = self._take()
        logger.debug("flushing %s", describe(self.__wrapped__))
        return self._run(args, kwargs)

    async def join(self):
        """Wait for tasks started by earlier firings to finish.

        Their errors are left to the loop, as with any other firing.
        """
        while self._tasks:
            await asyncio.wait(set(self._tasks))


class LoopDebouncer:
    def __init__(self, wait, loop=None):
        self.wait = check_wait(wait)
        self.loop = loop

    def debounce(self, func):
        return LoopDebounced(func, self.wait, loop=self.loop)


def debounce(func, wait, loop=None):
    return LoopDebounced(func, wait, loop=loop)
