from __future__ import annotations


class PriceFeedError(Exception):
    """Base class for every failure that aborts an export run."""


class FetchError(PriceFeedError):
    pass


class DecodeError(PriceFeedError, ValueError):
    pass


class WriteError(PriceFeedError, OSError):
    pass


class ModeNotImplementedError(PriceFeedError, NotImplementedError):
    pass
