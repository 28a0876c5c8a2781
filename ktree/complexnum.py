"""A small mutable complex number ordered by magnitude."""

from __future__ import annotations

import math


class Complex:
    """A complex number with a real and an imaginary part.

    Equality compares both parts exactly; ordering compares magnitudes.
    In-place operators modify the number itself.
    """

    __slots__ = ("real", "imaginary")

    def __init__(self, real: float, imaginary: float) -> None:
        self.real = float(real)
        self.imaginary = float(imaginary)

    def magnitude(self) -> float:
        """Return the distance of the number from the origin."""
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Build a number from two whitespace-separated values: real, imaginary."""
        parts = text.split()
        if len(parts) < 2:
            raise ValueError(f"expected a real and an imaginary part, got {text!r}")
        try:
            return cls(float(parts[0]), float(parts[1]))
        except ValueError as exc:
            raise ValueError(f"invalid complex number {text!r}") from exc

    # Arithmetic

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def __iadd__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        self.real += other.real
        self.imaginary += other.imaginary
        return self

    def __sub__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def __isub__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        self.real -= other.real
        self.imaginary -= other.imaginary
        return self

    def __mul__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(*self._product(other))

    def __imul__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        self.real, self.imaginary = self._product(other)
        return self

    def __truediv__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(*self._quotient(other))

    def __itruediv__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        self.real, self.imaginary = self._quotient(other)
        return self

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imaginary)

    def _product(self, other: Complex) -> tuple[float, float]:
        return (
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def _quotient(self, other: Complex) -> tuple[float, float]:
        denominator = other.real * other.real + other.imaginary * other.imaginary
        if denominator == 0:
            raise ZeroDivisionError("Can't divide by 0.")
        return (
            (self.real * other.real + self.imaginary * other.imaginary) / denominator,
            (self.imaginary * other.real - self.real * other.imaginary) / denominator,
        )

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    __hash__ = None  # mutable

    def __lt__(self, other: Complex) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.magnitude() < other.magnitude()

    def __le__(self, other: Complex) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.magnitude() <= other.magnitude()

    def __gt__(self, other: Complex) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.magnitude() > other.magnitude()

    def __ge__(self, other: Complex) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.magnitude() >= other.magnitude()

    # Text

    def __str__(self) -> str:
        return f"{self.real:g}+{self.imaginary:g}i"

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imaginary!r})"