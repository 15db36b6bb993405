"""Pytest fixtures and configuration."""

import csv

import pytest


@pytest.fixture
def sample_rows():
    """Sample statement rows in file layout (14 fields each)."""
    return [
        [
            "2635.json",
            "false",
            "Says the Annies List political group supports third-trimester abortions on demand.",
            "abortion",
            "dwayne-bohac",
            "State representative",
            "Texas",
            "republican",
            "0",
            "1",
            "0",
            "0",
            "0",
            "a mailer",
        ],
        [
            "10540.json",
            "half-true",
            "When did the decline of coal start? It started when natural gas took off.",
            "energy,history,job-accomplishments",
            "scott-surovell",
            "State delegate",
            "Virginia",
            "democrat",
            "0",
            "0",
            "1",
            "1",
            "0",
            "a floor speech.",
        ],
        [
            "324.json",
            "mostly-true",
            'Hillary Clinton agrees with John McCain "by voting to give George Bush '
            'the benefit of the doubt on war with Iran."',
            "foreign-policy",
            "barack-obama",
            "President",
            "Illinois",
            "democrat",
            "70",
            "71",
            "160",
            "163",
            "9",
            "Denver",
        ],
    ]


def write_rows(path, rows):
    """Write rows as a headerless CSV file."""
    with open(path, "w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(rows)
    return path


@pytest.fixture
def write_statements(tmp_path):
    """Factory writing rows to a named statements file under tmp_path."""
    def _write(rows, name="statements.csv"):
        return write_rows(tmp_path / name, rows)

    return _write


@pytest.fixture
def sample_statements_file(sample_rows, write_statements):
    """Create a temporary statements file."""
    return write_statements(sample_rows)


@pytest.fixture
def sample_stopwords_file(tmp_path):
    """Create a temporary plain stopword list."""
    path = tmp_path / "stopwords.txt"
    path.write_text(
        "\n".join(["the", "of", "on", "it", "to", "with", "when", "did", "says", "a"]),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_lexicon_file(tmp_path):
    """Create a temporary NRC word-level lexicon file."""
    path = tmp_path / "lexicon.txt"
    entries = [
        ("benefit", "positive", 1),
        ("decline", "negative", 1),
        ("demand", "anger", 1),
        ("demand", "negative", 1),
        ("doubt", "fear", 1),
        ("doubt", "negative", 1),
        ("doubt", "trust", 0),
        ("political", "joy", 0),
        ("war", "sadness", 1),
        ("war", "anger", 1),
        ("war", "fear", 1),
        ("war", "joy", 0),
        ("war", "negative", 1),
    ]
    path.write_text(
        "".join(f"{word}\t{emotion}\t{assoc}\n" for word, emotion, assoc in entries),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_config_file(
    tmp_path,
    sample_statements_file,
    sample_stopwords_file,
    sample_lexicon_file,
):
    """Create a temporary config file pointing at the sample data."""
    import yaml

    config_path = tmp_path / "config.yaml"
    config_data = {
        "data": {
            "statements_path": str(sample_statements_file),
            "stopwords_path": str(sample_stopwords_file),
            "lexicon_path": str(sample_lexicon_file),
        },
        "report": {
            "output_dir": str(tmp_path / "figures"),
            "make_charts": False,
        },
        "log_level": "WARNING",
    }
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path
