from httpx_browserkit.__version__ import __version__
from httpx_browserkit._models import NOISY_HEADERS, Response
from httpx_browserkit._serializer import Serializer

__all__ = [
    "__version__",
    "NOISY_HEADERS",
    "Response",
    "Serializer",
]
