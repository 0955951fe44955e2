#Polynomial class

import logging
import numbers
import operator
import re
import numpy as np
import sympy as sp

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Rendering defaults used by str(Polynomial)
VARIABLE = "X"
PRECISION = 1

# One term of a rendered polynomial, e.g. "-2.5*X^3", "+X", "4.0"
_TERM_PATTERN = re.compile(r"([+-]?)(\d+(?:\.\d*)?|\.\d+)?(?:(\*?)([xX])(?:\^(\d+))?)?")


# Base class for errors raised by polynomial operations
class PolynomialError(ValueError):
    pass


# Operation not defined for the polynomial's state, e.g. degree of no coefficients
class InvalidStateError(PolynomialError):
    pass


# Text or a symbolic expression could not be read as a polynomial
class ParseError(PolynomialError):
    pass


# Real number used as a multiplier of a polynomial
class Scalar:
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = float(value)

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return other.scale(self.value)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, Scalar):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Scalar({self.value!r})"


# coefficients[i] is the coefficient of X^i, so [1.0, 2.0, 1.0] is 1 + 2X + X^2.
# Trailing zeros are kept as given. Every operation returns a new polynomial.
class Polynomial:
    # Keep numpy from treating a polynomial as an array operand, e.g. in np.float64(2) * p
    __array_ufunc__ = None

    def __init__(self, coefficients=()):
        coefficients = np.array(coefficients, dtype=float)
        if coefficients.ndim != 1:
            raise PolynomialError(f"Coefficients must be a flat sequence, got shape {coefficients.shape}.")
        coefficients.setflags(write=False)
        self._coefficients = coefficients

    @property
    def coefficients(self):
        return self._coefficients

    def __repr__(self):
        return f"Polynomial({self._coefficients.tolist()!r})"

    def __str__(self):
        return format_polynomial(self._coefficients)

    def __len__(self):
        return len(self._coefficients)

    def __iter__(self):
        return (float(coef) for coef in self._coefficients)

    # Coefficient of X^power; powers past the stored length read as zero
    def __getitem__(self, power):
        power = operator.index(power)
        if power < 0:
            raise IndexError(f"Negative power {power} has no coefficient.")
        if power >= len(self._coefficients):
            return 0.0
        return float(self._coefficients[power])

    def degree(self):
        if len(self._coefficients) == 0:
            logger.debug("degree() called on a polynomial with no coefficients")
            raise InvalidStateError("An empty polynomial has no degree.")
        return len(self._coefficients) - 1

    # Sum of c_i * x^i, computed with explicit powers
    def evaluate(self, x):
        powers = np.power(float(x), np.arange(len(self._coefficients)))
        return float(np.sum(self._coefficients * powers))

    def scale(self, k):
        return Polynomial(self._coefficients * float(k))

    def negate(self):
        return self.scale(-1.0)

    # Method to pad arrays to the same length (for addition/subtraction only)
    @staticmethod
    def pad_arrays(arr1, arr2):
        max_len = max(len(arr1), len(arr2))
        arr1_padded = np.pad(arr1, (0, max_len - len(arr1)), mode='constant')
        arr2_padded = np.pad(arr2, (0, max_len - len(arr2)), mode='constant')
        return arr1_padded, arr2_padded

    def add(self, other):
        coeff1_padded, coeff2_padded = self.pad_arrays(self._coefficients, other.coefficients)
        return Polynomial(coeff1_padded + coeff2_padded)

    def subtract(self, other):
        return self.add(other.negate())

    # Convolution of the two coefficient sequences
    def multiply(self, other):
        coeff1, coeff2 = self._coefficients, other.coefficients
        if len(coeff1) == 0 or len(coeff2) == 0:
            return Polynomial(np.zeros(max(len(coeff1) + len(coeff2) - 1, 0)))
        return Polynomial(np.convolve(coeff1, coeff2))

    def derivative(self):
        n = len(self._coefficients)
        if n <= 1:
            return Polynomial([0.0])
        return Polynomial(self._coefficients[1:] * np.arange(1, n))

    # Antiderivative with the integration constant fixed at zero
    def primitive(self):
        n = len(self._coefficients)
        return Polynomial(np.concatenate(([0.0], self._coefficients / np.arange(1, n + 1))))

    def __add__(self, other):
        if isinstance(other, Polynomial):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Polynomial):
            return self.subtract(other)
        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return self.multiply(other)
        if isinstance(other, Scalar):
            return self.scale(other.value)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    # Structural equality: same length, same coefficients
    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return (len(self._coefficients) == len(other.coefficients)
                    and bool(np.all(self._coefficients == other.coefficients)))
        return NotImplemented

    # Static method to create a Polynomial instance from its rendered form, e.g. "1.0 + 2.0*X + X^2"
    @staticmethod
    def from_string(expression):
        # Numbers split by whitespace ("1 2") are not a sum of terms
        if re.search(r"[\d.]\s+[\d.]", expression):
            raise ParseError(f"Malformed polynomial expression: {expression!r}")
        compact = re.sub(r"\s+", "", expression)
        if not compact:
            raise ParseError("Cannot parse an empty string as a polynomial.")

        terms = re.findall(r"[+-]?[^+-]+", compact)
        if "".join(terms) != compact:
            raise ParseError(f"Malformed polynomial expression: {expression!r}")

        by_power = {}
        for term in terms:
            match = _TERM_PATTERN.fullmatch(term)
            if match is None:
                raise ParseError(f"Malformed term {term!r} in {expression!r}")
            sign_str, coefficient_str, star, variable, power_str = match.groups()
            if coefficient_str is None and (variable is None or star):
                raise ParseError(f"Malformed term {term!r} in {expression!r}")

            coefficient = float(coefficient_str) if coefficient_str is not None else 1.0
            if sign_str == '-':
                coefficient = -coefficient

            if variable is None:
                power = 0
            elif power_str is None:
                power = 1
            else:
                power = int(power_str)
            by_power[power] = by_power.get(power, 0.0) + coefficient

        ordered_coefficients = np.zeros(max(by_power) + 1)
        for power, coefficient in by_power.items():
            ordered_coefficients[power] = coefficient
        logger.debug("parsed %r into %d coefficients", expression, len(ordered_coefficients))
        return Polynomial(ordered_coefficients)

    # Convert to a Sympy expression
    def to_sympy(self, symbol=VARIABLE):
        x = sp.Symbol(symbol)
        return sp.Add(*[sp.Float(coef) * x**power for power, coef in enumerate(self)])

    # Convert a Sympy expression back to a Polynomial object
    @staticmethod
    def from_sympy(expr, symbol=VARIABLE):
        x = sp.Symbol(symbol)
        try:
            poly_expr = sp.Poly(sp.sympify(expr), x)
            coeffs = [float(c) for c in reversed(poly_expr.all_coeffs())]
        except sp.SympifyError as exc:
            raise ParseError(f"Cannot read {expr!r} as an expression.") from exc
        except sp.PolynomialError as exc:
            raise ParseError(f"{expr} is not a polynomial in {symbol}.") from exc
        except TypeError as exc:
            raise ParseError(f"{expr} has non-numeric coefficients in {symbol}.") from exc
        logger.debug("converted %s into %d coefficients", expr, len(coeffs))
        return Polynomial(coeffs)


# Sign token placed before every non-constant term
def _sign_str(coefficient):
    return "+ " if coefficient >= 0 else "- "


# NaN prints as "NaN"; infinities as "inf"/"-inf"
def _number_str(value, precision):
    if np.isnan(value):
        return "NaN"
    return f"{value:.{precision}f}"


# Method to format the polynomial
def format_polynomial(coeff, variable=VARIABLE, precision=PRECISION):
    terms = []
    for power, coefficient in enumerate(coeff):
        coefficient = float(coefficient)

        # Skip if the coefficient is zero
        if coefficient == 0:
            continue

        magnitude = abs(coefficient)
        if power == 0:
            terms.append(_number_str(coefficient, precision))
            continue

        monomial = variable if power == 1 else f"{variable}^{power}"
        if magnitude == 1:
            terms.append(f"{_sign_str(coefficient)}{monomial}")
        else:
            terms.append(f"{_sign_str(coefficient)}{_number_str(magnitude, precision)}*{monomial}")

    if not terms:
        return "0"

    result = " ".join(terms)
    if result.startswith("+"):
        result = result[1:].lstrip()
    return result
