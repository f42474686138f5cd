class BigIntegerError(Exception):  # Root of all biginteger failures.
    pass

class InvalidInput(BigIntegerError, ValueError):  # Absent, malformed or unsupported constructor input.
    pass

class DivisionByZero(BigIntegerError, ZeroDivisionError):  # Zero divisor or modulus.
    pass

class InverseDoesNotExist(BigIntegerError, ArithmeticError):  # Operand and modulus are not coprime.
    pass

class ImplementationAlreadySet(BigIntegerError, RuntimeError):  # Registry already holds a backend.
    pass

class ImplementationNotSet(BigIntegerError, RuntimeError):  # Registry is still empty.
    pass

class PrecisionLoss(BigIntegerError, OverflowError):  # Value outside the exact float-integer range.
    pass

class InsufficientLength(BigIntegerError, ValueError):  # Requested byte length below the minimal encoding.
    pass
