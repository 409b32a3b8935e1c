from __future__ import annotations


class BusinessDayError(Exception):
    """Base exception for all business-day errors."""


class ConfigurationError(BusinessDayError):
    """An engine configuration value is malformed or can never be satisfied."""


class InvalidArgumentError(BusinessDayError, ValueError):
    """An argument passed to a holiday, range or engine operation is invalid."""


class SourceError(BusinessDayError):
    """A holiday source could not deliver a usable list of dates."""


class SourceAuthorizationError(SourceError):
    """A holiday source rejected the supplied credentials."""
