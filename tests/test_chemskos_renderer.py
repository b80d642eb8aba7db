import io

import pytest

from sdfconv.models import Atom, Bond, Molecule
from sdfconv.renderers import ChemSKOSRenderer


@pytest.fixture
def molecule():
    mol = Molecule()
    mol.add_atom(Atom("C", 0.0, 0.0, 0.0))
    mol.add_atom(Atom("O", 1.43, 0.0, 0.0))
    mol.add_bond(Bond(source=1, order=1, target=2, stereo=0))
    mol.add_property("ChEBI ID", "https://www.ebi.ac.uk/chebi/searchId.do?chebiId=1234")
    mol.add_property("Formula", "CH4O")
    return mol


def test_molecule_and_structure_blocks(molecule):
    out = io.StringIO()
    ChemSKOSRenderer().render(molecule, 2, out)

    assert out.getvalue() == (
        "molecule m2 (\n"
        "  'ChEBI ID' : 'https://www.ebi.ac.uk/chebi/searchId.do?chebiId=1234'\n"
        "  'Formula' : 'CH4O'\n"
        ")\n"
        "structure m2 (\n"
        "  atom a1 'C' 0.0 0.0 0.0\n"
        "  atom a2 'O' 1.43 0.0 0.0\n"
        "  bond a1 a2 1 0\n"
        ")\n"
    )


def test_one_block_of_each_kind(molecule):
    out = io.StringIO()
    ChemSKOSRenderer().render(molecule, 1, out)
    text = out.getvalue()
    assert text.count("molecule m1 (") == 1
    assert text.count("structure m1 (") == 1


if __name__ == "__main__":
    pytest.main([__file__])
