from typing import Mapping, Sequence, Union

HeaderValue = Union[str, Sequence[str]]
HeaderMapping = Mapping[str, HeaderValue]
