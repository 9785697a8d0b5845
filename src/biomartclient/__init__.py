from ._version import __version__

from .errors import BiomartError, NetworkError, ServiceError, ParseError
from .query import Attribute, Filter, Query, QueryBuilder
from .response import Response
from .metadata import Mart, DatasetInfo, FilterInfo, AttributeInfo
from .client import MartClient, DEFAULT_URL
from .dataset import Dataset
from . import metadata

__all__ = [
    "BiomartError",
    "NetworkError",
    "ServiceError",
    "ParseError",
    "Attribute",
    "Filter",
    "Query",
    "QueryBuilder",
    "Response",
    "Mart",
    "DatasetInfo",
    "FilterInfo",
    "AttributeInfo",
    "MartClient",
    "DEFAULT_URL",
    "Dataset",
    "metadata",
]
