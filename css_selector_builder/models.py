from typing import Any, Union

from pydantic import BaseModel

Number = Union[int, float]

class Rectangle(BaseModel):
    width: Number
    height: Number

    def __init__(self, width: Number, height: Number, **data: Any):
        # Positional construction lets deserialize() rebuild it from JSON values
        super().__init__(width=width, height=height, **data)

    def area(self) -> Number:
        return self.width * self.height
