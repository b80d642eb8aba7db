"""Shared fixtures for sdfconv tests."""

from pathlib import Path

import pytest

INPUT_DIR = Path(__file__).parent / "test_data" / "input"


@pytest.fixture
def input_dir():
    return INPUT_DIR


@pytest.fixture
def three_atoms_path():
    """One record: 3 carbons, 2 bonds, a single Formula property."""
    return INPUT_DIR / "three_atoms.sdf"


@pytest.fixture
def chebi_path():
    """Two ChEBI-style records with database cross-references."""
    return INPUT_DIR / "chebi_records.sdf"


@pytest.fixture
def malformed_path():
    """A record with bad numeric fields followed by an unterminated record."""
    return INPUT_DIR / "malformed.sdf"



@pytest.fixture
def bad_bond_path():
    """A record with a non-numeric bond order followed by a valid record."""
    return INPUT_DIR / "bad_bond.sdf"


@pytest.fixture
def quoted_values_path():
    """One record with quotes, a backslash and a space inside URL values."""
    return INPUT_DIR / "quoted_values.sdf"
