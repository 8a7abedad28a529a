from argparse import Namespace

import pytest

from autosw.engine.structures.configuration import AlignmentConfiguration

def test_defaults():
    configuration = AlignmentConfiguration()
    assert configuration.gap_penalty == 16
    assert configuration.substitution_matrix == "NUC.4.4"
    assert configuration.output_format == "tsv"

def test_from_arguments():
    configuration = AlignmentConfiguration.from_arguments(Namespace(gap_penalty=4, output_format="pair"))
    assert configuration == AlignmentConfiguration(4, "NUC.4.4", "pair")

@pytest.mark.parametrize("gap_penalty,substitution_matrix,output_format", [
    (-1, "NUC.4.4", "tsv"),
    (2**63, "NUC.4.4", "tsv"),
    (16, "BLOSUM62", "tsv"),
    (16, "NUC.4.4", "sam"),
])
def test_invalid_configuration_is_rejected(gap_penalty, substitution_matrix, output_format):
    with pytest.raises(ValueError):
        AlignmentConfiguration(gap_penalty, substitution_matrix, output_format)
