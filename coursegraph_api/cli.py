#!/usr/bin/env python3
"""Course graph CLI - lay out, validate and inspect catalog JSON files."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from coursegraph import (
    Catalog, LayoutDirection, LayoutError,
    build_graph, layout_elements, get_settings,
    get_dependent_courses, get_prerequisite_courses,
)
from coursegraph.validation import validate_catalog, validation_summary
from coursegraph.analysis import summarize_catalog


def _json_out(data, code=0):
    print(json.dumps(data))
    sys.exit(code)


def _error_out(message, **extra):
    _json_out({"status": "error", "error": message, **extra}, code=1)


def _load_catalog(path):
    """Read and validate a catalog file."""
    try:
        with open(path, encoding="utf-8") as f:
            return Catalog.model_validate(json.load(f))
    except OSError as e:
        _error_out(f"Cannot read {path}: {e.strerror}")
    except json.JSONDecodeError as e:
        _error_out(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})")
    except UnicodeDecodeError as e:
        _error_out(f"Cannot decode {path} as UTF-8: {e.reason} at byte {e.start}")
    except ValidationError as e:
        _error_out(f"Invalid catalog in {path}: {e.error_count()} error(s)",
                   details=json.loads(e.json(include_url=False)))


# ── Commands ─────────────────────────────────────────────────────────────────

def cmd_layout(args):
    settings = get_settings()
    catalog = _load_catalog(args.file)
    direction = LayoutDirection(args.direction) if args.direction else settings.default_direction

    graph = build_graph(catalog)
    try:
        nodes = layout_elements(graph.nodes, graph.edges, direction, settings.layout_config())
    except LayoutError as e:
        details = e.to_dict()
        _error_out(details.pop("detail"), **details)

    _json_out({
        "status": "ok",
        "direction": direction.value,
        "nodes": [n.to_json_dict() for n in nodes],
        "edges": [e.to_json_dict() for e in graph.edges],
    })


def cmd_validate(args):
    issues = validate_catalog(_load_catalog(args.file))
    summary = validation_summary(issues)
    _json_out({
        "status": "ok" if summary["valid"] else "invalid",
        "issues": [i.to_dict() for i in issues],
        "summary": summary,
    }, code=0 if summary["valid"] else 1)


def cmd_summarize(args):
    summary = summarize_catalog(_load_catalog(args.file), top_n=args.top)
    _json_out({"status": "ok", "summary": summary.to_dict()})


def cmd_relations(args):
    catalog = _load_catalog(args.file)
    if catalog.get_course(args.course_id) is None:
        _error_out(f"Course {args.course_id} not found")

    edges = build_graph(catalog).edges
    _json_out({
        "status": "ok",
        "course_id": args.course_id,
        "prerequisites": get_prerequisite_courses(edges, args.course_id),
        "dependents": get_dependent_courses(edges, args.course_id),
    })


def main(argv=None):
    parser = argparse.ArgumentParser(prog="coursegraph", description="Course prerequisite graph tool")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("layout")
    p.add_argument("file")
    p.add_argument("--direction", choices=[d.value for d in LayoutDirection], default=None)

    p = sub.add_parser("validate")
    p.add_argument("file")

    p = sub.add_parser("summarize")
    p.add_argument("file")
    p.add_argument("--top", type=int, default=5)

    p = sub.add_parser("relations")
    p.add_argument("file")
    p.add_argument("--course-id", required=True)

    args = parser.parse_args(argv)

    logging.basicConfig(level=get_settings().log_level.upper(), stream=sys.stderr)

    cmd_map = {
        "layout": cmd_layout,
        "validate": cmd_validate,
        "summarize": cmd_summarize,
        "relations": cmd_relations,
    }
    cmd_map[args.command](args)


if __name__ == "__main__":
    main()
