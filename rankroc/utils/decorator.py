import warnings
import numpy as np
import pandas as pd
import polars as pl
from functools import wraps
import inspect
from typing import Callable, Any


def _to_numpy(value: Any, param_name: str) -> Any:
    """Convert a pandas/polars column-like object to a 1D NumPy array."""
    if isinstance(value, (pd.Series, pl.Series)):
        return value.to_numpy()

    if isinstance(value, (pd.DataFrame, pl.DataFrame)):
        if value.shape[1] != 1:
            raise ValueError(
                f"Parameter '{param_name}' must be a single column, "
                f"got DataFrame with {value.shape[1]} columns."
            )
        return value.to_numpy()[:, 0]

    if isinstance(value, (np.ndarray, list, tuple)):
        return np.asarray(value)

    # Not a supported container: the wrapped function will have to handle it.
    warnings.warn(
        f"Input type {type(value)} for parameter '{param_name}' "
        "is not a pandas/polars object, NumPy array or sequence. "
        "Passing as is.",
        UserWarning,
        stacklevel=3,
    )
    return value


def as_numpy_array(*param_names: str) -> Callable:
    """
    A decorator that converts the named Series/DataFrame/sequence arguments
    of a function to NumPy arrays before the call.

    pandas and polars Series are converted directly; single-column
    DataFrames are flattened to their only column. Multi-column frames are
    rejected since a score or label vector is always one-dimensional.

    Args:
        *param_names (str): The names of the function parameters to convert.

    Returns:
        Callable: The wrapper function.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        sig = inspect.signature(func)
        for name in param_names:
            if name not in sig.parameters:
                raise ValueError(
                    f"Parameter '{name}' not found in function signature: "
                    f"{list(sig.parameters.keys())}."
                )

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            for name in param_names:
                bound_args.arguments[name] = _to_numpy(
                    bound_args.arguments[name], name
                )

            return func(*bound_args.args, **bound_args.kwargs)

        return wrapper

    return decorator
