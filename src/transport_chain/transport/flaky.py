"""Transport that simulates bursts of upstream failures.

Outside a flaky window nearly every call goes straight to the wrapped
transport. On roughly 3% of those calls a window of up to 90 seconds opens, and
until it closes every call is intercepted: half of them get a synthetic error
response, the other half fail with ``httpx.NetworkError``. The wrapped
transport is never called while a window is open.

Neither outcome is marked as injected. Callers see an ordinary unsuccessful
response or an ordinary transport error, which is what retry and error handling
code needs to be exercised against.

Example:
    ```python
    import httpx
    from transport_chain.transport.flaky import FlakyTransport

    transport = FlakyTransport(wrapped_transport=httpx.HTTPTransport())

    with httpx.Client(transport=transport) as client:
        response = client.get("https://api.example.com/items")
    ```

The seed is logged at INFO when the transport is created; pass it back as
``seed=`` to replay the same sequence of decisions.
"""

import logging
import random
import threading
import time
from collections.abc import Callable, Sequence

import httpx

from transport_chain.sanitize import sanitize
from transport_chain.transport.base import WrappingTransport

logger = logging.getLogger(__name__)

FLAKY_ERROR_BODY = b"flaky error body"
FLAKY_REASON_PHRASE = b"Flaky Error"


class FlakyTransport(WrappingTransport):
    """Inject error responses and transport errors in time-bounded windows.

    A lock guards the window end time and every draw from the random
    generator, so one instance can be shared between threads. The wrapped
    transport is called outside the lock.

    Args:
        wrapped_transport: The underlying transport to wrap
        seed: Seed for the random generator (default: current time in ns)
        rng: Random generator to use instead of a seeded one
        clock: Wall-clock source in seconds (default: ``time.time``)
        calm_threshold: Draws below this value delegate (default: 0.97)
        max_window: Upper bound (exclusive) of a window, in seconds (default: 90)
        status_codes: Status codes for synthetic responses
        logger: Logger for the seed (INFO) and injected failures (DEBUG)
        sanitizer: Function masking secrets in logged request descriptions
    """

    DEFAULT_STATUS_CODES: tuple[int, ...] = (401, 403, 404, 408, 500, 503)
    default_logger = logger

    def __init__(
        self,
        *,
        wrapped_transport: httpx.BaseTransport | httpx.AsyncBaseTransport,
        seed: int | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
        calm_threshold: float = 0.97,
        max_window: float = 90.0,
        status_codes: Sequence[int] | None = None,
        logger: logging.Logger | None = None,
        sanitizer: Callable[[str], str] = sanitize,
    ) -> None:
        if not 0.0 <= calm_threshold <= 1.0:
            raise ValueError(f"calm_threshold must be within [0, 1], got {calm_threshold}")
        if max_window <= 0:
            raise ValueError(f"max_window must be positive, got {max_window}")
        status_codes = tuple(status_codes) if status_codes is not None else self.DEFAULT_STATUS_CODES
        if not status_codes:
            raise ValueError("status_codes must not be empty")

        super().__init__(wrapped_transport=wrapped_transport)
        self._logger = logger or self.default_logger
        self._sanitize = sanitizer
        self._clock = clock
        self.calm_threshold = calm_threshold
        self.max_window = max_window
        self.status_codes = status_codes

        if rng is None:
            if seed is None:
                seed = time.time_ns()
            self._logger.info(f"Flaky rand seed {seed}")
            rng = random.Random(seed)
        self._rng = rng
        self._lock = threading.Lock()
        self._end_time = 0.0

    @property
    def end_time(self) -> float:
        """Clock value at which the current flaky window closes."""
        return self._end_time

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        response = self._intercept(request)
        if response is None:
            return self._wrapped_transport.handle_request(request)
        return response

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = self._intercept(request)
        if response is None:
            return await self._wrapped_transport.handle_async_request(request)
        return response

    def _intercept(self, request: httpx.Request) -> httpx.Response | None:
        """Decide the outcome of one call.

        Returns:
            None to delegate, or a synthetic error response.

        Raises:
            httpx.NetworkError: For the injected transport failure.
        """
        with self._lock:
            now = self._clock()
            if now > self._end_time:
                if self._rng.random() < self.calm_threshold:
                    return None
                window = self._rng.randrange(max(1, int(self.max_window * 1000))) / 1000
                self._end_time = now + window
                self._logger.debug(f"Flaky http for {window:.3f}s")

            drop = self._rng.randrange(2) == 0
            status_code = self._rng.choice(self.status_codes) if drop else None

        description = self._sanitize(f"{request.method} {request.url}")
        if status_code is None:
            self._logger.debug(f"Returning error from http request {description}")
            raise httpx.NetworkError("flaky http error", request=request)

        self._logger.debug(f"Dropping http request {description} -> {status_code}")
        return httpx.Response(
            status_code,
            content=FLAKY_ERROR_BODY,
            request=request,
            extensions={"reason_phrase": FLAKY_REASON_PHRASE},
        )
