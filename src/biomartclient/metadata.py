"""
Parsers for the listing responses of a martservice: the mart registry (XML) and the dataset, filter and
attribute listings (TSV)
"""

import dataclasses
import xml.etree.ElementTree as ET
from typing import List, Tuple

import pandas as pd

from .errors import ParseError


@dataclasses.dataclass(frozen=True)
class Mart:
    name: str
    display_name: str
    host: str
    port: int
    path: str
    server_virtual_schema: str
    database: str = ""
    include_datasets: str = ""
    mart_user: str = ""
    visible: bool = False
    default: bool = False


@dataclasses.dataclass(frozen=True)
class DatasetInfo:
    name: str
    description: str
    kind: str = ""
    visible: bool = False
    assembly: str = ""
    last_update: str = ""


@dataclasses.dataclass(frozen=True)
class FilterInfo:
    name: str
    display_name: str
    options: Tuple[str, ...] = ()
    description: str = ""
    page: str = ""
    type: str = ""
    operator: str = ""


@dataclasses.dataclass(frozen=True)
class AttributeInfo:
    name: str
    display_name: str
    description: str = ""
    page: str = ""
    format: str = ""


def _flag(value):
    # anything but an explicit "1" counts as unset
    return value == "1"


def parse_registry(xml: str) -> List[Mart]:
    try:
        root = ET.fromstring(xml.strip())
    except ET.ParseError as e:
        raise ParseError(f"Registry is not valid XML: {e}") from e
    if root.tag != "MartRegistry":
        raise ParseError(f"Expected a MartRegistry document, got <{root.tag}>")

    marts = []
    for location in root.iter("MartURLLocation"):
        attrib = location.attrib
        try:
            port = attrib["port"]
            marts.append(
                Mart(
                    name=attrib["name"],
                    display_name=attrib["displayName"],
                    host=attrib["host"],
                    port=int(port),
                    path=attrib["path"],
                    server_virtual_schema=attrib["serverVirtualSchema"],
                    database=attrib.get("database", ""),
                    include_datasets=attrib.get("includeDatasets", ""),
                    mart_user=attrib.get("martUser", ""),
                    visible=_flag(attrib.get("visible")),
                    default=_flag(attrib.get("default")),
                )
            )
        except KeyError as e:
            raise ParseError(f"MartURLLocation is missing the {e.args[0]!r} attribute") from e
        except ValueError as e:
            raise ParseError(f"MartURLLocation has an invalid port {port!r}") from e
    return marts


def _rows(tsv, min_columns, what):
    for line in tsv.split("\n"):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        row = line.split("\t")
        if len(row) < min_columns:
            raise ParseError(f"Expected at least {min_columns} columns in {what} listing, got {line!r}")
        yield row


def _get(row, ix):
    return row[ix] if ix < len(row) else ""


def _options(value):
    value = value.strip()
    if value.startswith("[") and value.endswith("]"):
        value = value[1:-1]
    return tuple(option for option in value.split(",") if option)


def parse_datasets(tsv: str) -> List[DatasetInfo]:
    return [
        DatasetInfo(
            name=row[1],
            description=row[2],
            kind=row[0],
            visible=_flag(_get(row, 3)),
            assembly=_get(row, 4),
            last_update=_get(row, 8),
        )
        for row in _rows(tsv, 3, "dataset")
    ]


def parse_filters(tsv: str) -> List[FilterInfo]:
    return [
        FilterInfo(
            name=row[0],
            display_name=row[1],
            options=_options(_get(row, 2)),
            description=_get(row, 3),
            page=_get(row, 4),
            type=_get(row, 5),
            operator=_get(row, 6),
        )
        for row in _rows(tsv, 2, "filter")
    ]


def parse_attributes(tsv: str) -> List[AttributeInfo]:
    return [
        AttributeInfo(
            name=row[0],
            display_name=row[1],
            description=_get(row, 2),
            page=_get(row, 3),
            format=_get(row, 4),
        )
        for row in _rows(tsv, 2, "attribute")
    ]


def to_frame(records) -> pd.DataFrame:
    """
    Convert a list of listing records into a dataframe indexed by name
    """
    records = list(records)
    if not records:
        return pd.DataFrame().rename_axis("name")
    return pd.DataFrame([dataclasses.asdict(record) for record in records]).set_index("name")
