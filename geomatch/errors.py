"""
Exceptions raised by the matching engine and its data sources.
"""


class GeoMatchError(Exception):
    """Base class for every error raised by geomatch."""


class SearchFailedError(GeoMatchError):
    """The live provider registry could not answer a range query."""


class ContractViolationError(GeoMatchError):
    """A data source produced candidates that do not have the shared output shape."""


class InvalidTransitionError(GeoMatchError):
    """A service request status change that the lifecycle does not allow."""
