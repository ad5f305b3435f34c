import pytest


HEADER = "nom\tadresse\tcp\tville\tcontact\n"


@pytest.fixture
def write_tsv(tmp_path):
    """Write a tab-delimited input file from a list of 5-field rows."""

    def _write(rows, name="adresses.tsv", header=HEADER):
        path = tmp_path / name
        lines = [header] + ["\t".join(r) + "\n" for r in rows]
        path.write_text("".join(lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_rows():
    return [
        ("Jean Dupont", "1 Rue de la Paix", "75002", "Paris", "0600000000"),
        ("Marie Curie", "12 rue Pierre et Marie Curie", "75005", "Paris", "marie@example.org"),
        ("Ain Dépôt", "3 avenue Alsace-Lorraine", "01000", "Bourg-en-Bresse", ""),
        ("Nulle Part", "99 chemin inconnu", "99999", "Ailleurs", "0700000000"),
        ("  Espaces ", " 5 place Bellecour ", "69002", "LYON", "contact"),
    ]
