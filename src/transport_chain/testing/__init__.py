"""Testing utilities for code built on the transport chain.

Example:
    ```python
    from transport_chain.testing import FakeClock, ScriptedRandom
    from transport_chain.transport import FlakyTransport

    # Enter a window, take the synthetic-response branch, pick status_codes[5]
    transport = FlakyTransport(
        wrapped_transport=httpx.MockTransport(handler),
        rng=ScriptedRandom(fractions=[0.99], integers=[1000, 0], choices=[5]),
        clock=FakeClock(100.0),
    )
    ```
"""

from transport_chain.testing.fakes import FakeClock, ScriptedRandom

__all__ = ["FakeClock", "ScriptedRandom"]
