"""
Exception hierarchy for unit parsing, registration and conversion.
"""


class UnitConvertError(Exception):
    """Base class for all errors raised by unitconvert."""
    pass


class UnitWarning(UserWarning):
    """Advisory condition that does not prevent a definition or conversion."""
    pass


class UnitSyntaxError(UnitConvertError, ValueError):
    """Raised when a definition or unit expression is malformed."""

    def __init__(self, message: str, text: str = None, position: int = None):
        if text is not None:
            message = f"{message} in '{text}'"
            if position is not None:
                message = f"{message} at position {position}"
        super().__init__(message)
        self.text = text
        self.position = position


class UnknownSymbolError(UnitConvertError, LookupError):
    """Raised when an expression references a symbol that is not registered."""

    def __init__(self, symbol: str):
        super().__init__(f"Unit '{symbol}' does not exist in the registry")
        self.symbol = symbol

    def __str__(self) -> str:
        # LookupError would otherwise repr() the message
        return self.args[0]


class DuplicateSymbolError(UnitConvertError):
    """Raised when a symbol is defined a second time."""

    def __init__(self, symbol: str):
        super().__init__(f"Unit '{symbol}' already exists in the registry")
        self.symbol = symbol


class DimensionMismatchError(UnitConvertError):
    """Raised when converting or adding quantities with different dimensions."""

    def __init__(self, source, target, operation: str = "convert"):
        if operation == "convert":
            message = f"Cannot convert from {source} to {target}: incompatible dimensions"
        else:
            message = (
                f"Cannot {operation} quantities with different dimensions: "
                f"{source} and {target}"
            )
        super().__init__(message)
        self.source = source
        self.target = target


class NumericError(UnitConvertError, ArithmeticError):
    """Raised for invalid numeric literals and non-finite scale factors."""
    pass


class OffsetUnitError(UnitConvertError):
    """Raised when an offset unit (e.g. degC) is combined with other units."""
    pass


class RegistryMismatchError(UnitConvertError):
    """Raised when a quantity is converted through a registry it did not come from."""
    pass


class DefinitionLoadError(UnitConvertError):
    """Raised by bulk loading; wraps the first failing definition line."""

    def __init__(self, line_number: int, line: str, cause: Exception):
        super().__init__(f"Line {line_number}: {cause} (while loading '{line.strip()}')")
        self.line_number = line_number
        self.line = line
        self.cause = cause
