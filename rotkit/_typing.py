from typing import Union, Literal, Type

import numpy as np
import numpy.typing as npt

FLOATING_ARRAY = np.typing.NDArray[np.floating]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]

SCALAR_TYPE = Type[np.floating]

EULER_ORDERS = Literal['xyz', 'xzy', 'xyx', 'xzx', 'yxz', 'yzx', 'yxy', 'yzy', 'zxy', 'zyx', 'zyz', 'zxz']
