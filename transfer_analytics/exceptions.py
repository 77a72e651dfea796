"""
Custom exception hierarchy for transfer-analytics.

Data-quality problems (short rows, unparsable fees, blank categories)
are never raised: they are dropped or excluded by the parser and the
queries. Exceptions are reserved for structural problems the library
cannot interpret at all.
"""


class TransferAnalyticsError(Exception):
    """Base exception for all transfer-analytics errors."""


class SchemaError(TransferAnalyticsError):
    """Raised when the source text carries no header row.

    Only raised when the caller asks for a header explicitly
    (``require_header=True``); otherwise an empty input simply yields
    an empty record sequence.
    """


class ConfigValidationError(TransferAnalyticsError):
    """Raised when an analytics config file fails validation.

    This can happen if:
    - The YAML file is empty.
    - The YAML document is not a mapping.

    Field-level problems (non-positive limits, duplicate leagues) surface
    as ``pydantic.ValidationError`` from the model itself.
    """


class UnknownClubError(TransferAnalyticsError):
    """Raised when a strict club lookup names a club absent from the data."""
