#!/usr/bin/env python3
# src/sdfconv/resolvers/database_links.py

"""
Expansion of database cross-reference properties into dereferenceable URLs.

Each recognized property name maps to a small strategy that turns the raw
identifier into a URL. Some strategies also change the property name
(PubChem compound vs. substance links). Unrecognized names pass through.
"""

from typing import Callable, Dict

from ..models.molecule import Property

LinkStrategy = Callable[[str, str], Property]


def template(prefix: str, suffix: str = "") -> LinkStrategy:
    """Substitute the raw value between a fixed prefix and suffix."""

    def _expand(name: str, value: str) -> Property:
        return Property(name, f"{prefix}{value}{suffix}")

    return _expand


def strip_label(prefix: str, length: int) -> LinkStrategy:
    """Drop a fixed-length label (e.g. ``CHEBI:``) before substituting.

    Values not longer than the label are left unchanged.
    """

    def _expand(name: str, value: str) -> Property:
        if len(value) <= length:
            return Property(name, value)
        return Property(name, f"{prefix}{value[length:]}")

    return _expand


def replace_spaces(prefix: str) -> LinkStrategy:
    """Substitute the value as a query string with spaces encoded as ``+``."""

    def _expand(name: str, value: str) -> Property:
        return Property(name, prefix + value.replace(" ", "+"))

    return _expand


PUBCHEM_LABEL_LENGTH = 5  # "CID: " / "SID: "
PUBCHEM_LINKS = {
    "CID": ("PubChem Database Molecule Links", "https://pubchem.ncbi.nlm.nih.gov/compound/"),
    "SID": ("PubChem Database Substance Links", "https://pubchem.ncbi.nlm.nih.gov/substance/"),
}


def pubchem(name: str, value: str) -> Property:
    """Split PubChem links into compound and substance properties by their sub-tag.

    Values with an unknown sub-tag, or too short to carry an id, keep their
    name and value so the cross-reference still reaches the output
    instead of being dropped from the record.
    """
    link = PUBCHEM_LINKS.get(value[:3])
    if link is None or len(value) <= PUBCHEM_LABEL_LENGTH:
        return Property(name, value)
    target_name, prefix = link
    return Property(target_name, prefix + value[PUBCHEM_LABEL_LENGTH:])


DATABASE_LINKS: Dict[str, LinkStrategy] = {
    "Agricola Citation Links": template(
        "https://agricola.nal.usda.gov/cgi-bin/Pwebrecon.cgi?Search_Arg=",
        "&DB=local&CNT=25&Search_Code=GKEY%5E&STARTDB=AGRIDB",
    ),
    "ArrayExpress Database Links": template("https://www.ebi.ac.uk/arrayexpress/experiments/"),
    "BioModels Database Links": template("https://www.ebi.ac.uk/biomodels-main/"),
    "ChEBI ID": strip_label("https://www.ebi.ac.uk/chebi/searchId.do?chebiId=", 6),
    "DrugBank Database Links": template("https://www.drugbank.ca/drugs/"),
    "ECMDB Database Links": template("http://ecmdb.ca/compounds/"),
    "HMDB Database Links": template("http://www.hmdb.ca/metabolites/"),
    "IntAct Database Links": template("https://www.ebi.ac.uk/intact/interaction/"),
    "IntEnz Database Links": replace_spaces("http://www.ebi.ac.uk/intenz/query?q="),
    "KEGG COMPOUND Database Links": template("http://www.genome.jp/dbget-bin/www_bget?cpd:"),
    "KEGG DRUG Database Links": template("http://www.genome.jp/dbget-bin/www_bget?dr:"),
    "KEGG GLYCAN Database Links": template("http://www.genome.jp/dbget-bin/www_bget?gl:"),
    "KNApSAcK Database Links": template("http://kanaya.naist.jp/knapsack_jsp/information.jsp?word="),
    "LIPID MAPS instance Database Links": template("http://www.lipidmaps.org/data/LMSDRecord.php?LMID="),
    "MetaCyc Database Links": template("https://metacyc.org/compound?orgid=META&id="),
    "Patent Database Links": template("https://worldwide.espacenet.com/searchResults?query="),
    "PDBeChem Database Links": template("http://www.ebi.ac.uk/pdbe-srv/pdbechem/chemicalCompound/show/"),
    "PubChem Database Links": pubchem,
    "PubMed Central Citation Links": template("https://www.ncbi.nlm.nih.gov/pmc/articles/", "/"),
    "PubMed Citation Links": template("https://www.ncbi.nlm.nih.gov/pubmed/?term="),
    "Reactome Database Links": template("https://reactome.org/content/detail/"),
    "RESID Database Links": template("http://pir.georgetown.edu/cgi-bin/resid?id="),
    "Rhea Database Links": template("https://www.rhea-db.org/reaction?id="),
    "SABIO-RK Database Links": template("http://sabio.h-its.org/reacdetails.jsp?reactid="),
    "UM-BBD compID Database Links": template(
        "http://eawag-bbd.ethz.ch/servlets/pageservlet?ptype=c&compID="
    ),
    "UniProt Database Links": template("https://www.uniprot.org/uniprot/"),
    "Wikipedia Database Links": template("https://en.wikipedia.org/wiki/"),
    "YMDB Database Links": template("http://www.ymdb.ca/compounds/"),
}


def resolve(name: str, value: str) -> Property:
    """
    Resolve a property value into a database URL when the name is known.

    Args:
        name: Property name from the record's data block
        value: Raw (already escaped) property value

    Returns:
        Property with the output name and the URL, or the input unchanged
    """
    strategy = DATABASE_LINKS.get(name)
    if strategy is None:
        return Property(name, value)
    return strategy(name, value)


def expand_url(name: str, value: str) -> str:
    """Return only the resolved value for a property."""
    return resolve(name, value).value
