class MeasurementException(Exception):
    """
    Base exception for all measurement errors.
    """


class LadderDefinitionError(MeasurementException, ValueError):
    """
    Raised when a ladder is built from an invalid sequence of steps.
    """


class BridgeDefinitionError(MeasurementException, ValueError):
    """
    Raised when a pivot bridge table is inconsistent.
    """


class UnitNotRegisteredError(MeasurementException, KeyError):
    """
    Raised when a unit has no registration in a dimension's bridge table.
    Indicates a caller contract violation, not a conversion failure.
    """


class ParseError(MeasurementException, ValueError):
    """
    Base exception for "<amount><unit>" parsing errors.
    """


class InvalidUnitError(ParseError):
    """
    Raised when no known unit suffix terminates the text.
    """


class InvalidAmountError(ParseError):
    """
    Raised when the amount part is missing, malformed or not finite.
    """
