"""schema.org vocabulary for molecule properties."""

from typing import Optional
from urllib.parse import quote

from ..models.molecule import unescape_value

SCHEMA_NS = "https://schema.org/"

# Characters left as-is when a URL value becomes an IRI; existing %XX escapes are kept
IRI_SAFE = ":/?#[]@!$&'()*+,;=%~"

# Data block names (ChEBI, PubChem style) mapped to MolecularEntity terms
SCHEMA_PROPERTIES = {
    "ChEBI ID": "identifier",
    "ChEBI Name": "name",
    "NAME": "name",
    "Name": "name",
    "Definition": "description",
    "IUPAC Names": "iupacName",
    "IUPAC Name": "iupacName",
    "Synonyms": "alternateName",
    "Formulae": "molecularFormula",
    "Formula": "molecularFormula",
    "Mass": "molecularWeight",
    "Molecular Weight": "molecularWeight",
    "Monoisotopic Mass": "monoisotopicMolecularWeight",
    "SMILES": "smiles",
    "InChI": "inChI",
    "InChIKey": "inChIKey",
}


def schema_term(name: str) -> Optional[str]:
    return SCHEMA_PROPERTIES.get(name)


def is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def to_iri(value: str) -> str:
    """
    Turn an escaped record value into a serializable IRI.

    The statement escaping applied at parse time is undone, then spaces,
    backslashes and other characters not allowed in an IRI are
    percent-encoded.
    """
    return quote(unescape_value(value), safe=IRI_SAFE)
