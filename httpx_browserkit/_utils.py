from typing import Any, Dict, List, Tuple, Union

import httpx

from ._types import HeaderMapping

HeaderPair = Tuple[Union[str, bytes], Union[str, bytes]]


def _coerce(value: Any) -> Union[str, bytes]:
    if isinstance(value, (str, bytes)):
        return value
    return str(value)


def headers_to_raw(headers: HeaderMapping) -> List[HeaderPair]:
    """
    Flatten a header mapping into the list of pairs `httpx.Headers` accepts.

    A list or tuple value becomes one pair per item, in order.
    """
    raw: List[HeaderPair] = []
    for name, value in headers.items():
        if isinstance(value, (list, tuple)):
            raw.extend((_coerce(name), _coerce(item)) for item in value)
        else:
            raw.append((_coerce(name), _coerce(value)))
    return raw


def headers_from_httpx(headers: httpx.Headers) -> Dict[str, Any]:
    """
    Group `httpx.Headers` back into a mapping, keeping the first-seen casing
    of each name. Repeated names map to a list of their values.
    """
    grouped: Dict[str, Any] = {}
    names: Dict[str, str] = {}
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        value = raw_value.decode(headers.encoding)
        key = names.setdefault(name.lower(), name)
        if key not in grouped:
            grouped[key] = value
        elif isinstance(grouped[key], list):
            grouped[key].append(value)
        else:
            grouped[key] = [grouped[key], value]
    return grouped
