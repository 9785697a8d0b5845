# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.14.7
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # Querying BioMart

# %% tags=["hide_output"]
import biomartclient as bmc

# %% [markdown]
# A client talks to a single martservice endpoint. We first look at which marts and datasets it serves:

# %%
client = bmc.MartClient("http://www.ensembl.org/biomart/martservice")
marts = client.marts()
[mart.name for mart in marts]

# %%
datasets = bmc.metadata.to_frame(client.datasets("ENSEMBL_MART_ENSEMBL"))
datasets.head()

# %% [markdown]
# Each dataset has filters, to restrict the rows, and attributes, the columns that are returned:

# %%
filters = bmc.metadata.to_frame(client.filters("ENSEMBL_MART_ENSEMBL", "hsapiens_gene_ensembl"))
attributes = bmc.metadata.to_frame(client.attributes("ENSEMBL_MART_ENSEMBL", "hsapiens_gene_ensembl"))
attributes.head()

# %% [markdown]
# ## Running a query

# %%
query = (
    bmc.QueryBuilder()
    .mart("ENSEMBL_MART_ENSEMBL")
    .dataset("hsapiens_gene_ensembl")
    .attributes(["affy_hg_u133_plus_2", "entrezgene_id"])
    .filter("affy_hg_u133_plus_2", ["202763_at", "209310_s_at", "207500_at"])
    .build()
)
response = client.query(query)
response.header(), list(response.records())

# %% [markdown]
# The same query through a `Dataset`, which returns a dataframe:

# %%
dataset = bmc.Dataset.from_genome("GRCh38")
dataset.get(
    [dataset.attribute("affy_hg_u133_plus_2"), dataset.attribute("entrezgene_id")],
    filters=[dataset.filter("affy_hg_u133_plus_2", value=["202763_at", "209310_s_at", "207500_at"])],
)
