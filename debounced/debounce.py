import functools
import logging
import threading

from .utils import check_operation, check_wait, describe, to_seconds

logger = logging.getLogger("debounced")


class Debounced:
    """Callable that collapses a burst of calls into one trailing call.

    Every call records its arguments and re-arms a timer thread; the wrapped
    function only runs once ``wait`` milliseconds pass without another call,
    with the arguments of the last one.
    """

    def __init__(self, func, wait):
        check_operation(func)
        check_wait(wait)
        functools.update_wrapper(self, func)
        self.wait = wait
        self._timer = None
        # bumped on every re-arm, a timer only fires while its number is current
        self._generation = 0
        self._args = ()
        self._kwargs = {}
        self._lock = threading.Lock()
        # firings that already left the timer and are running the function
        self._running = 0
        self._idle = threading.Condition(self._lock)

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def __call__(self, *args, **kwargs):
        with self._lock:
            self._args = args
            self._kwargs = kwargs
            if self._timer is not None:
                self._timer.cancel()  # Cancel the existing timer if there is one
                logger.debug("superseding pending call to %s", describe(self.__wrapped__))
            self._generation += 1
            self._timer = threading.Timer(
                to_seconds(self.wait), self._fire, args=(self._generation,)
            )
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, generation):
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            args, kwargs = self._take()
            self._running += 1
        logger.debug("firing %s", describe(self.__wrapped__))
        try:
            # errors go to threading.excepthook, the debouncer does not retry
            self.__wrapped__(*args, **kwargs)
        finally:
            with self._lock:
                self._running -= 1
                self._idle.notify_all()

    def _take(self):
        self._timer = None
        self._generation += 1
        args, kwargs = self._args, self._kwargs
        self._args, self._kwargs = (), {}
        return args, kwargs

    def cancel(self):
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            self._take()
        logger.debug("cancelled pending call to %s", describe(self.__wrapped__))

    def flush(self):
        """Run the pending call right away and return its result, if any."""
        with self._lock:
            if self._timer is None:
                return None
            self._timer.cancel()
            args, kwargs = self._take()
        logger.debug("flushing %s", describe(self.__wrapped__))
        return self.__wrapped__(*args, **kwargs)

    def join(self, timeout=None) -> bool:
        """Wait for firings already running on a timer thread to finish.

        Pending firings are not waited for, flush them first. Returns False
        if the timeout ran out.
        """
        with self._lock:
            return self._idle.wait_for(lambda: self._running == 0, timeout)


class Debouncer:
    def __init__(self, wait):
        self.wait = check_wait(wait)

    def debounce(self, func):
        return Debounced(func, self.wait)


def debounce(func, wait):
    return Debounced(func, wait)
