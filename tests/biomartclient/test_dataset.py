import biomartclient as bmc
import pytest


@pytest.fixture
def dataset(client):
    return bmc.Dataset("hsapiens_gene_ensembl", client=client)


class TestDataset:
    def test_list_attributes(self, dataset):
        attributes = dataset.list_attributes()
        assert "entrezgene_id" in attributes.index
        assert attributes.loc["ensembl_gene_id", "display_name"] == "Gene stable ID"

    def test_list_filters(self, dataset):
        filters = dataset.list_filters()
        assert filters.loc["chromosome_name", "options"] == ("1", "2", "3", "X", "Y", "MT")

    def test_get(self, dataset, routes, session):
        routes["query"] = "ENSG00000139618\tBRCA2\t32315474\nENSG00000012048\tBRCA1\t43044295\n"
        result = dataset.get(
            [
                dataset.attribute("ensembl_gene_id"),
                dataset.attribute("external_gene_name"),
                "start_position",
            ],
            filters=[dataset.filter("external_gene_name", value=["BRCA1", "BRCA2"])],
        )
        assert list(result.columns) == ["ensembl_gene_id", "external_gene_name", "start_position"]
        assert result["external_gene_name"].tolist() == ["BRCA2", "BRCA1"]
        assert result["start_position"].tolist() == [32315474, 43044295]

        query = session.calls[0][2]["query"]
        assert 'header="0"' in query
        assert 'value="BRCA1,BRCA2"' in query

    def test_get_empty(self, dataset, routes):
        routes["query"] = "\n"
        result = dataset.get(["ensembl_gene_id"])
        assert result.empty
        assert list(result.columns) == ["ensembl_gene_id"]

    def test_query(self, dataset):
        query = dataset.query(["ensembl_gene_id"], [dataset.filter("with_hgnc", excluded=False)])
        assert query.mart == "ENSEMBL_MART_ENSEMBL"
        assert query.dataset == "hsapiens_gene_ensembl"
        assert query.filters[0].is_boolean


class TestFromGenome:
    def test_simple(self):
        dataset = bmc.Dataset.from_genome("GRCh37")
        assert dataset.name == "hsapiens_gene_ensembl"
        assert dataset.client.url == "http://grch37.ensembl.org/biomart/martservice"

        assert bmc.Dataset.from_genome("mm10").name == "mmusculus_gene_ensembl"
        assert bmc.Dataset.from_genome("GRCz11").name == "drerio_gene_ensembl"

    def test_unsupported(self):
        with pytest.raises(ValueError):
            bmc.Dataset.from_genome("TAIR10")


class TestAttributeOptions:
    def test_simple(self, dataset):
        query = dataset.query([dataset.attribute("ensembl_gene_id", interface="default"), "external_gene_name"])
        assert '<Attribute name="ensembl_gene_id" interface="default" />' in query.xml
        assert query.attributes == ("ensembl_gene_id", "external_gene_name")
