"""Shared fixtures: a resolver bundle, a small sample ontology and graph factories."""

import types

import pytest
from rdflib import Namespace

from semgraph import SemanticGraph

EX = Namespace("http://example.org/onto#")

SAMPLE_TTL = """
@prefix ex: <http://example.org/onto#> .
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

ex:Agent a owl:Class ;
    rdfs:comment "Something that acts." .

ex:Person a owl:Class ;
    rdfs:subClassOf ex:Agent ;
    rdfs:comment "A human being." .

ex:Organization a owl:Class ;
    rdfs:subClassOf ex:Agent .

ex:name a owl:DatatypeProperty, owl:FunctionalProperty ;
    rdfs:domain ex:Agent ;
    rdfs:range xsd:string ;
    rdfs:comment "Display name." .

ex:age a owl:DatatypeProperty, owl:FunctionalProperty ;
    rdfs:domain ex:Person ;
    rdfs:range xsd:integer .

ex:nickname a owl:DatatypeProperty ;
    rdfs:domain ex:Person ;
    rdfs:range xsd:string .

ex:knows a owl:ObjectProperty ;
    rdfs:domain ex:Person ;
    rdfs:range ex:Person .

ex:employer a owl:ObjectProperty, owl:FunctionalProperty ;
    rdfs:domain ex:Person ;
    rdfs:range ex:Organization .

ex:alice a ex:Person ;
    ex:name "Alice" ;
    ex:knows ex:bob .

ex:bob a ex:Person ;
    ex:name "Bob" .
"""


class StubResolvers:
    """Resolver bundle over a dict of application objects keyed by id."""

    def __init__(self, objects=None, class_of=None):
        self.objects = objects or {}
        self.class_of = class_of or {}
        self.calls = []

    def resolve_resource(self, external_id, context, info):
        self.calls.append(("resolve_resource", external_id))
        return self.objects.get(external_id)

    def resolve_source_class_iri(self, source):
        self.calls.append(("resolve_source_class_iri", source))
        return self.class_of.get(source["id"])

    def resolve_source_id(self, source):
        return source["id"]


@pytest.fixture
def resolvers():
    alice = {"id": "alice"}
    return StubResolvers(objects={"alice": alice}, class_of={"alice": str(EX.Person)})


@pytest.fixture
def make_graph(resolvers):
    def _make(config=None, ttl=SAMPLE_TTL):
        g = SemanticGraph(resolvers, config or {})
        if ttl:
            g.parse(ttl)
        return g

    return _make


@pytest.fixture
def graph(make_graph):
    return make_graph()


@pytest.fixture
def minimal_resolvers():
    return types.SimpleNamespace(
        resolve_resource=lambda external_id, context, info: None,
        resolve_source_class_iri=lambda source: None,
    )
