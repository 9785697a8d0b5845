import xml.etree.ElementTree as ET

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?><!DOCTYPE Query>'
REQUEST_ID = "biomartclient"


class Attribute:
    def __init__(self, name, **kwargs):
        self.name = name
        self.kwargs = kwargs

    def to_xml(self):
        return ET.Element("Attribute", name=self.name, **self.kwargs)

    def __eq__(self, other):
        return isinstance(other, Attribute) and (self.name, self.kwargs) == (other.name, other.kwargs)

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"Attribute({self.name!r})"


class Filter:
    """
    A restriction on a dataset field

    A filter either matches a list of values, which are sent joined by a comma, or is a boolean filter
    (`value=None`) that includes or excludes rows having the field set.
    """

    separator = ","

    def __init__(self, name, value=None, excluded=None, **kwargs):
        self.name = name
        if value is None:
            if excluded is None:
                raise ValueError(f"Filter {name!r} needs either a value or an excluded flag")
            self.value = None
        elif isinstance(value, str):
            self.value = (value,)
        else:
            value = tuple(value)
            if not all(isinstance(v, str) for v in value):
                raise TypeError("Filter value must be a string")
            self.value = value
        self.excluded = excluded
        self.kwargs = kwargs

    @property
    def is_boolean(self):
        return self.value is None

    def to_xml(self):
        if self.is_boolean:
            return ET.Element("Filter", name=self.name, excluded=str(int(bool(self.excluded))), **self.kwargs)
        return ET.Element("Filter", name=self.name, value=self.separator.join(self.value), **self.kwargs)

    def __len__(self):
        return 0 if self.value is None else len(self.value)

    def __getitem__(self, ix):
        if self.value is None:
            raise TypeError("A boolean filter cannot be sliced")
        value = self.value[ix]
        if isinstance(value, str):
            value = (value,)
        return Filter(self.name, value=value, **self.kwargs)

    def __eq__(self, other):
        return isinstance(other, Filter) and (self.name, self.value, self.excluded, self.kwargs) == (
            other.name,
            other.value,
            other.excluded,
            other.kwargs,
        )

    def __hash__(self):
        return hash((self.name, self.value, self.excluded))

    def __repr__(self):
        if self.is_boolean:
            return f"Filter({self.name!r}, excluded={self.excluded!r})"
        return f"Filter({self.name!r}, value={list(self.value)!r})"


class Query:
    """
    An immutable BioMart query on a single dataset

    Use a `QueryBuilder` to create one. The XML document is rendered once, when the query is built.
    """

    __slots__ = ("_mart", "_dataset", "_attributes", "_filters", "_header", "_unique_rows", "_virtual_schema", "_xml")

    def __init__(
        self,
        mart="",
        dataset="",
        attributes=(),
        filters=(),
        header=True,
        unique_rows=True,
        virtual_schema="default",
    ):
        object.__setattr__(self, "_mart", mart)
        object.__setattr__(self, "_dataset", dataset)
        object.__setattr__(
            self, "_attributes", tuple(a if isinstance(a, Attribute) else Attribute(a) for a in attributes)
        )
        object.__setattr__(self, "_filters", tuple(filters))
        object.__setattr__(self, "_header", bool(header))
        object.__setattr__(self, "_unique_rows", bool(unique_rows))
        object.__setattr__(self, "_virtual_schema", virtual_schema)
        object.__setattr__(self, "_xml", self._render())

    def __setattr__(self, name, value):
        raise AttributeError("Query is immutable")

    mart = property(lambda self: self._mart)
    dataset = property(lambda self: self._dataset)
    attributes = property(lambda self: tuple(attribute.name for attribute in self._attributes))
    filters = property(lambda self: self._filters)
    header = property(lambda self: self._header)
    unique_rows = property(lambda self: self._unique_rows)
    virtual_schema = property(lambda self: self._virtual_schema)
    xml = property(lambda self: self._xml)

    def to_xml(self):
        xml = ET.Element(
            "Query",
            virtualSchemaName=self._virtual_schema,
            formatter="TSV",
            header=str(int(self._header)),
            uniqueRows=str(int(self._unique_rows)),
            count="0",
            datasetConfigVersion="0.6",
            requestid=REQUEST_ID,
        )
        dataset = ET.SubElement(xml, "Dataset", name=self._dataset, interface="default")
        for filter in self._filters:
            dataset.append(filter.to_xml())
        for attribute in self._attributes:
            dataset.append(attribute.to_xml())
        return xml

    def _render(self):
        return XML_PROLOG + ET.tostring(self.to_xml(), encoding="unicode")

    def __str__(self):
        return self._xml

    def __eq__(self, other):
        return isinstance(other, Query) and (self._mart, self._xml) == (other._mart, other._xml)

    def __hash__(self):
        return hash((self._mart, self._xml))

    def __repr__(self):
        return f"Query(mart={self._mart!r}, dataset={self._dataset!r}, attributes={list(self.attributes)!r})"


class QueryBuilder:
    """
    Accumulates the parts of a query

    Example:
        query = (
            QueryBuilder()
            .mart("ENSEMBL_MART_ENSEMBL")
            .dataset("hsapiens_gene_ensembl")
            .attributes(["ensembl_gene_id", "external_gene_name"])
            .filter("chromosome_name", ["1"])
            .build()
        )
    """

    def __init__(self):
        self._mart = ""
        self._dataset = ""
        self._attributes = []
        self._filters = []
        self._header = True
        self._unique_rows = True
        self._virtual_schema = "default"

    def mart(self, mart):
        self._mart = mart
        return self

    def dataset(self, dataset):
        self._dataset = dataset
        return self

    def attribute(self, attribute):
        self._attributes.append(attribute)
        return self

    def attributes(self, attributes):
        for attribute in attributes:
            self.attribute(attribute)
        return self

    def filter(self, filter, values=None):
        if not isinstance(filter, Filter):
            filter = Filter(filter, value=values)
        self._filters.append(filter)
        return self

    def boolean_filter(self, filter, excluded=False):
        self._filters.append(Filter(filter, excluded=excluded))
        return self

    def header(self, header=True):
        self._header = header
        return self

    def unique_rows(self, unique_rows=True):
        self._unique_rows = unique_rows
        return self

    def virtual_schema(self, virtual_schema):
        self._virtual_schema = virtual_schema
        return self

    def build(self) -> Query:
        return Query(
            mart=self._mart,
            dataset=self._dataset,
            attributes=self._attributes,
            filters=self._filters,
            header=self._header,
            unique_rows=self._unique_rows,
            virtual_schema=self._virtual_schema,
        )
