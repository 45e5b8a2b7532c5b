# =============================================================================
# iss_core/errors.py  -  Exceptions raised by the core lookups
# =============================================================================
# The tool layer catches IssToolError (and anything unexpected) at the
# handler boundary and turns it into a failure envelope.  The message of each
# exception is what the caller ends up reading, so keep it descriptive.
# =============================================================================


class IssToolError(Exception):
    """Base class for every error raised by iss_core."""


class ScheduleFileNotFoundError(IssToolError):
    """The crew schedule CSV is not where it should be."""


class ScheduleParseError(IssToolError):
    """The crew schedule CSV is malformed (missing columns or short rows)."""


class WeatherLookupError(IssToolError):
    """The external search call failed or reported an error."""
