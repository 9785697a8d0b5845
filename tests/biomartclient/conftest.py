import biomartclient as bmc
import pytest
import requests


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    """
    Stands in for requests.Session, answering from a dict keyed by the `type` parameter, or by "query" for posts
    """

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def _answer(self, key):
        answer = self.routes[key]
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, FakeResponse):
            return answer
        return FakeResponse(answer)

    def get(self, url, params=None, timeout=None):
        self.calls.append(("GET", url, params, timeout))
        return self._answer(params["type"])

    def post(self, url, data=None, timeout=None):
        self.calls.append(("POST", url, data, timeout))
        return self._answer("query")


REGISTRY = """<MartRegistry>
    <MartURLLocation database="ensembl_mart_99" default="1" displayName="Ensembl Genes 99" host="www.ensembl.org" includeDatasets="" martUser="" name="ENSEMBL_MART_ENSEMBL" path="/biomart/martservice" port="80" serverVirtualSchema="default" visible="1" />
    <MartURLLocation database="mouse_mart_99" displayName="Mouse strains 99" host="www.ensembl.org" name="ENSEMBL_MART_MOUSE" path="/biomart/martservice" port="80" serverVirtualSchema="default" visible="0" />
</MartRegistry>"""

DATASETS = (
    "\n"
    "TableSet\thsapiens_gene_ensembl\tHuman genes (GRCh38.p13)\t1\tGRCh38.p13\t200\t50000\tdefault\t2020-01-10 12:00:00\n"
    "TableSet\tmmusculus_gene_ensembl\tMouse genes (GRCm38.p6)\t1\tGRCm38.p6\t200\t50000\tdefault\t2020-01-10 12:00:00\n"
    "\n"
)

FILTERS = (
    "chromosome_name\tChromosome/scaffold name\t[1,2,3,X,Y,MT]\t\tfilters\tlist\t=\tgene__main\tname_1059\n"
    "affy_hg_u133_plus_2\tAFFY HG U133 Plus 2 probe ID(s)\t[]\tFilter to include genes with supplied list of probe IDs\tfilters\tid_list\t=,in\tgene__main\tid\n"
)

ATTRIBUTES = (
    "ensembl_gene_id\tGene stable ID\tStable ID of the Gene\tfeature_page\thtml,txt,csv,tsv,xls\thsapiens_gene_ensembl__gene__main\tstable_id_1023\n"
    "entrezgene_id\tNCBI gene ID\tNCBI gene ID\tfeature_page\thtml,txt,csv,tsv,xls\thsapiens_gene_ensembl__ox_entrezgene__dm\tdbprimary_acc_1074\n"
)

AFFY_RESULT = "AFFY HG U133 Plus 2 probe\tNCBI gene ID\n209310_s_at\t837\n207500_at\t838\n202763_at\t836\n"


@pytest.fixture
def routes():
    return {
        "registry": REGISTRY,
        "datasets": DATASETS,
        "filters": FILTERS,
        "attributes": ATTRIBUTES,
        "query": AFFY_RESULT,
    }


@pytest.fixture
def session(routes):
    return FakeSession(routes)


@pytest.fixture
def client(session):
    return bmc.MartClient("http://www.ensembl.org/biomart/martservice?", session=session)


@pytest.fixture
def affy_query():
    return (
        bmc.QueryBuilder()
        .mart("ENSEMBL_MART_ENSEMBL")
        .dataset("hsapiens_gene_ensembl")
        .attributes(["affy_hg_u133_plus_2", "entrezgene_id"])
        .filter("affy_hg_u133_plus_2", ["202763_at", "209310_s_at", "207500_at"])
        .build()
    )


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("Name or service not known")


@pytest.fixture
def fake_response():
    return FakeResponse
