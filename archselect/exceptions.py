"""Exception hierarchy for archselect."""


class ArchSelectError(Exception):
    """Base class for all archselect errors."""


class MatrixError(ArchSelectError):
    """The quality-pattern matrix violates its structural invariants."""


class GroupingFormatError(ArchSelectError, ValueError):
    """A grouping response could not be parsed into condition ids."""


class OracleError(ArchSelectError):
    """An LLM-backed oracle could not produce an answer."""


class OracleTimeoutError(OracleError):
    """An oracle call did not complete within its timeout."""
