# tools/describe.py
"""Load ontology files and print how one class resolves: hierarchy and fields.

    semgraph-describe data/fibo.ttl --class https://spec.edmcouncil.org/fibo/ontology/FND/Agreements/Contracts/Contract
"""
import argparse, json, os, sys
from pathlib import Path

from semgraph import ConfigurationError, NotFoundError, SemanticGraph
from semgraph.core.fields import PROPERTY_IRI


class _NoResolvers:
    def resolve_resource(self, external_id, context, info):
        return None

    def resolve_source_class_iri(self, source):
        return None


def describe(g: SemanticGraph, class_iri: str) -> dict:
    t = g.get_object_type(class_iri)
    fields = []
    for name, field in t.fields.items():
        extensions = dict(field.extensions or {})
        row = {"name": name, "type": str(field.type), "property_uri": extensions.pop(PROPERTY_IRI, None)}
        if field.description:
            row["description"] = field.description
        if extensions:
            row["extensions"] = extensions
        fields.append(row)
    return {
        "class_uri": class_iri,
        "name": t.name,
        "description": t.description,
        "superclasses": g.get_superclasses(class_iri)[1:],
        "interfaces": [i.name for i in t.interfaces],
        "fields": fields,
    }


def main(argv=None):
    p = argparse.ArgumentParser(description="Describe how an ontology class resolves to an output type")
    p.add_argument("files", nargs="+", help="Ontology files (Turtle, N-Triples, RDF/XML, ...)")
    p.add_argument("--class", dest="class_iri", required=True, help="Class IRI or prefix:Local")
    p.add_argument("--format", default=os.getenv("SEMGRAPH_FORMAT"), help="Parser format (default: from extension)")
    p.add_argument("--relay", action="store_true", help="Describe with relay node/connection wiring")
    p.add_argument("-o", "--out", default=None, help="Path to write JSON (default: stdout)")
    args = p.parse_args(argv)

    try:
        g = SemanticGraph(_NoResolvers(), {"relay": args.relay})
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    for f in args.files:
        g.parse_file(f, format=args.format)

    class_iri = g.expand(args.class_iri)
    try:
        payload = describe(g, class_iri)
    except NotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    js = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    if args.out:
        Path(args.out).write_text(js, encoding="utf-8")
        print(f"✔ Wrote {args.out}")
    else:
        print(js)
    return 0


if __name__ == "__main__":
    sys.exit(main())
