"""Mathematical symbols."""

from __future__ import annotations

from enum import Enum


class MathSymbol(str, Enum):
    # Operations
    PLUS = "+"
    MINUS = "−"  # U+2212
    MULTIPLY = "×"  # U+00D7
    DIVIDE = "÷"  # U+00F7
    # Comparison
    EQUALS = "="
    NOT_EQUALS = "≠"  # U+2260
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "≤"  # U+2264
    GREATER_THAN_OR_EQUAL = "≥"  # U+2265
    # Sets
    ELEMENT_OF = "∈"  # U+2208
    NOT_ELEMENT_OF = "∉"  # U+2209
    SUBSET = "⊂"  # U+2282
    SUPERSET = "⊃"  # U+2283
    UNION = "∪"  # U+222A
    INTERSECTION = "∩"  # U+2229
    # Logic
    AND = "∧"  # U+2227
    OR = "∨"  # U+2228
    NOT = "¬"  # U+00AC
    THEREFORE = "∴"  # U+2234
    BECAUSE = "∵"  # U+2235
    # Calculus
    PARTIAL_DERIVATIVE = "∂"  # U+2202
    INTEGRAL = "∫"  # U+222B
    CONTOUR_INTEGRAL = "∮"  # U+222E
    INFINITY = "∞"  # U+221E
    # Geometry
    DEGREE = "°"  # U+00B0
    PERPENDICULAR = "⟂"  # U+27C2
    ANGLE = "∠"  # U+2220
    MEASURED_ANGLE = "∡"  # U+2221
    # Greek
    ALPHA = "α"  # U+03B1
    BETA = "β"  # U+03B2
    GAMMA = "γ"  # U+03B3
    DELTA = "δ"  # U+03B4
    PI = "π"  # U+03C0
    SIGMA = "σ"  # U+03C3
    # Other
    PLUS_MINUS = "±"  # U+00B1
    SQRT = "√"  # U+221A
    CUBE_ROOT = "∛"  # U+221B
    DOT = "⋅"  # U+22C5
    PROPORTIONAL = "∝"  # U+221D
