from dataclasses import dataclass
from typing import Literal

FmtStr = Literal['f']

@dataclass(frozen=True, eq=False)
class DType:
  itemsize: int
  name: str
  fmt: FmtStr

class dtypes:
  float32 = DType(4, 'float32', 'f')
  default = float32
