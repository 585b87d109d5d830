"""
isometric_projection/validation.py

Lightweight validation utilities for projection inputs.

Provides scalar checks for tile dimensions and coordinate components, and
shape checks for batched point arrays. All validators raise ValidationError
on bad values and TypeError on non-numeric input.

Usage
-----
>>> from isometric_projection.validation import validate_positive
>>> validate_positive(28.0, "tile_width")
"""

import math
import numbers
from typing import Any, Optional, Sequence, Tuple

import numpy as np


class ValidationError(ValueError):
    """
    Raised when a projection input fails validation.

    Subclass of ValueError for compatibility with existing error handling.
    """

    pass


def validate_finite_scalar(
    value: float,
    name: str = "value",
) -> float:
    """
    Validate that a scalar value is finite.

    Parameters
    ----------
    value : float
        Value to validate.
    name : str
        Name for error messages.

    Returns
    -------
    float
        The value converted to float.

    Raises
    ------
    ValidationError
        If value is inf or nan.
    TypeError
        If value is not numeric.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be numeric, got bool")
    try:
        float_val = float(value)
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be numeric, got {type(value).__name__}") from e

    if not math.isfinite(float_val):
        raise ValidationError(f"{name} must be finite, got {value}")
    return float_val


def validate_positive(
    value: float,
    name: str = "value",
) -> None:
    """
    Validate that a value is strictly positive.

    Parameters
    ----------
    value : float
        Value to validate.
    name : str
        Name for error messages.

    Raises
    ------
    ValidationError
        If value is zero or negative.
    """
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")


def validate_range(
    value: float,
    min_val: Optional[float],
    max_val: Optional[float],
    name: str = "value",
) -> None:
    """
    Validate that a value lies within inclusive bounds.

    Parameters
    ----------
    value : float
        Value to validate.
    min_val : float or None
        Minimum acceptable value. None for no lower bound.
    max_val : float or None
        Maximum acceptable value. None for no upper bound.
    name : str
        Name for error messages.

    Raises
    ------
    ValidationError
        If value is outside the range.
    """
    if min_val is not None and value < min_val:
        raise ValidationError(f"{name} must be >= {min_val}, got {value}")
    if max_val is not None and value > max_val:
        raise ValidationError(f"{name} must be <= {max_val}, got {value}")


def validate_integral(
    value: Any,
    name: str = "value",
) -> int:
    """
    Validate that a value is an integer, or a float holding an integral value.

    Parameters
    ----------
    value : Any
        Value to validate.
    name : str
        Name for error messages.

    Returns
    -------
    int
        The value as a Python int.

    Raises
    ------
    ValidationError
        If value is a non-integral or non-finite number.
    TypeError
        If value is not numeric, or is a bool.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got bool")
    if isinstance(value, numbers.Integral):
        return int(value)
    float_val = validate_finite_scalar(value, name)
    if not float_val.is_integer():
        raise ValidationError(f"{name} must be integral, got {value}")
    return int(float_val)


def validate_vector3(
    value: Sequence[Any],
    name: str = "vector",
) -> Tuple[Any, Any, Any]:
    """
    Validate that a value is a sequence of exactly three components.

    Strings and mappings are rejected. Components themselves are not
    checked here.

    Raises
    ------
    ValidationError
        If the sequence does not have length 3.
    TypeError
        If value is not a sequence.
    """
    if isinstance(value, (str, bytes, dict)):
        raise TypeError(f"{name} must be a sequence of 3 numbers, got {type(value).__name__}")
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ValidationError(
                f"{name} must be 1D with 3 components, got shape {value.shape}"
            )
        value = value.tolist()
    try:
        components = tuple(value)
    except TypeError as e:
        raise TypeError(
            f"{name} must be a sequence of 3 numbers, got {type(value).__name__}"
        ) from e

    if len(components) != 3:
        raise ValidationError(f"{name} must have 3 components, got {len(components)}")
    return components  # type: ignore[return-value]


def validate_points_array(
    points: Any,
    name: str = "points",
) -> np.ndarray:
    """
    Validate a batch of 3D points and return it as a float64 array.

    Parameters
    ----------
    points : array-like
        A single point with shape (3,) or a batch with shape (N, 3).
    name : str
        Name for error messages.

    Returns
    -------
    np.ndarray
        The points as a float64 array with the input's shape.

    Raises
    ------
    ValidationError
        If the shape is not (3,) or (N, 3), or values are non-finite or
        too large for float64.
    TypeError
        If the input cannot be converted to a numeric array.
    """
    try:
        array = np.asarray(points, dtype=np.float64)
    except OverflowError as e:
        raise ValidationError(f"{name} contains values outside the float range") from e
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a numeric array-like") from e

    if array.ndim not in (1, 2) or array.shape[-1] != 3:
        raise ValidationError(
            f"{name} must have shape (3,) or (N, 3), got {array.shape}"
        )

    if not np.all(np.isfinite(array)):
        n_inf = int(np.sum(np.isinf(array)))
        n_nan = int(np.sum(np.isnan(array)))
        raise ValidationError(
            f"{name} contains non-finite values: {n_inf} inf, {n_nan} nan"
        )
    return array
