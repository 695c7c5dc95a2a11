# src/smartdiff/errors.py


class ReviewError(Exception):
    """Base class for every failure a review run can surface to its caller."""
    kind = "review"


class ConfigurationError(ReviewError):
    kind = "configuration"


class ConnectivityError(ReviewError):
    kind = "connectivity"


class AuthenticationError(ReviewError):
    kind = "authentication"


class RateLimitError(ReviewError):
    kind = "rate_limit"


class QuotaError(ReviewError):
    kind = "quota"


class ModelNotFoundError(ReviewError):
    kind = "model_not_found"


class UnexpectedBackendError(ReviewError):
    kind = "unexpected"
