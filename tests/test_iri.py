import pytest
from rdflib import Literal

from semgraph.core.iri import get_iri_local_name, is_valid_iri


@pytest.mark.parametrize(
    "value",
    [
        "http://example.org/onto#Person",
        "https://spec.edmcouncil.org/fibo/ontology/FND/",
        "urn:isbn:0451450523",
        "mailto:someone@example.org",
        "urn:semgraph:field:abc#extra",
    ],
)
def test_valid_iris(value) -> None:
    assert is_valid_iri(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "Person",
        "_:b0",
        "_http://example.org/p",
        "http://example.org/with space",
        "http://example.org/<bad>",
        "1http://example.org",
        "http:",
        None,
        42,
        Literal("http://example.org/looks-like-an-iri"),
    ],
)
def test_invalid_iris(value) -> None:
    assert not is_valid_iri(value)


@pytest.mark.parametrize(
    "iri, expected",
    [
        ("http://example.org/onto#Person", "Person"),
        ("http://example.org/onto/Person", "Person"),
        ("urn:isbn:0451450523", "0451450523"),
        ("urn:semgraph:field:abc#extra", "extra"),
        ("http://example.org/onto#", "http://example.org/onto#"),
    ],
)
def test_local_name(iri, expected) -> None:
    assert get_iri_local_name(iri) == expected
