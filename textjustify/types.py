import numpy as np

type Vector[T] = np.ndarray[tuple[int, ...], np.dtype[T]]  # type: ignore[type-var]
type IntVector = Vector[np.int64]
type BoolVector = Vector[np.bool]

type Span = tuple[int, int]  # [start, end) word indices of one line
