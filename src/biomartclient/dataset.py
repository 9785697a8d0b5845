import io

import pandas as pd

from .client import DEFAULT_URL, MartClient
from .metadata import to_frame
from .query import Attribute, Filter, QueryBuilder


class Dataset:
    """
    A single BioMart dataset, with results returned as pandas dataframes
    """

    def __init__(
        self,
        name="hsapiens_gene_ensembl",
        mart="ENSEMBL_MART_ENSEMBL",
        url=DEFAULT_URL,
        client: MartClient = None,
    ):
        self.name = name
        self.mart = mart
        if client is None:
            client = MartClient(url)
        self.client = client

    def __repr__(self):
        return f"Dataset({self.name!r}, mart={self.mart!r}, url={self.client.url!r})"

    def list_attributes(self) -> pd.DataFrame:
        """
        List all attributes available in a dataset
        """
        return to_frame(self.client.attributes(self.mart, self.name))

    def list_filters(self) -> pd.DataFrame:
        """
        List all filters available in a dataset
        """
        return to_frame(self.client.filters(self.mart, self.name))

    def attribute(self, name, **kwargs):
        return Attribute(name, **kwargs)

    def filter(self, name, **kwargs):
        return Filter(name, **kwargs)

    def query(self, attributes=(), filters=(), header=False):
        builder = QueryBuilder().mart(self.mart).dataset(self.name).header(header)
        for attribute in attributes:
            builder.attribute(attribute)
        for filter in filters:
            builder.filter(filter)
        return builder.build()

    def get(self, attributes=(), filters=()) -> pd.DataFrame:
        """
        Get the result with a given set of attributes and filters

        Parameters:
            attributes:
                list of attributes (or attribute names) to return
            filters:
                list of filters to apply
        """
        query = self.query(attributes, filters)
        response = self.client.query(query)

        names = list(query.attributes)
        if not response.raw().strip():
            return pd.DataFrame(columns=names)
        return pd.read_table(io.StringIO(response.raw()), sep="\t", header=None, names=names)

    @classmethod
    def from_genome(cls, genome):
        """
        Get the biomart dataset given a particular genome name, e.g. GRCm38, GRCh38, GRCm39, mm10, hg19, ...
        """
        if genome in ["mm10", "GRCm38"]:
            return cls(
                "mmusculus_gene_ensembl",
                "ENSEMBL_MART_ENSEMBL",
                "https://nov2020.archive.ensembl.org/biomart/martservice",
            )
        elif genome in ["hg19", "GRCh37"]:
            return cls(
                "hsapiens_gene_ensembl",
                "ENSEMBL_MART_ENSEMBL",
                "http://grch37.ensembl.org/biomart/martservice",
            )
        elif genome in ["hg38", "GRCh38"]:
            return cls("hsapiens_gene_ensembl", "ENSEMBL_MART_ENSEMBL", DEFAULT_URL)
        elif genome in ["GRCm39"]:
            return cls("mmusculus_gene_ensembl", "ENSEMBL_MART_ENSEMBL", DEFAULT_URL)
        elif genome in ["GRCz11"]:
            return cls("drerio_gene_ensembl", "ENSEMBL_MART_ENSEMBL", DEFAULT_URL)
        else:
            raise ValueError("Genome not supported")
