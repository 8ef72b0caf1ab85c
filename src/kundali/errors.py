#!/usr/bin/env python3
"""
Exception taxonomy for chart and dasha computations.
"""


class KundaliError(Exception):
    """Base class for all engine errors"""

    pass


class InvalidMomentError(KundaliError, ValueError):
    """Raised when a date/time cannot be resolved to a valid calendar instant"""

    pass


class AdapterFailure(KundaliError):
    """Raised by an ephemeris adapter that cannot produce a sample

    Args:
        body: Body name that was requested (None for sidereal time)
        message: Failure description
    """

    def __init__(self, body: str | None, message: str):
        self.body = body
        super().__init__(f"Ephemeris failure for {body or 'sidereal time'}: {message}")


class ComputationFailed(KundaliError):
    """Raised to callers when a chart cannot be produced as a whole"""

    pass
