"""
Course Graph Backend - FastAPI Application

This is the main entry point for the course graph backend.
It provides:
- REST API for building, validating and laying out prerequisite graphs
- Relationship lookups for the course details panel
- CORS configuration for local frontend development

The service is stateless: every request carries the catalog it works on.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional

from coursegraph import (
    Catalog, LayoutDirection, LayoutError,
    build_graph, layout_elements, get_settings,
    get_dependent_courses, get_prerequisite_courses,
)
from coursegraph.validation import validate_catalog, validation_summary
from coursegraph.analysis import summarize_catalog

logger = logging.getLogger(__name__)


class LayoutRequest(BaseModel):
    """Request to lay out a catalog."""
    catalog: Catalog
    direction: Optional[LayoutDirection] = None  # settings default when omitted


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan handler for startup tasks."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Course graph service ready (default direction %s)", settings.default_direction.value)
    yield


# --- FastAPI App ---

app = FastAPI(
    title="Course Graph API",
    description="Prerequisite graph building and layered layout for course catalogs",
    version="1.0.0",
    lifespan=lifespan
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LayoutError)
async def layout_error_handler(request: Request, exc: LayoutError):
    """Report a catalog that cannot be laid out as an unprocessable request."""
    return JSONResponse(status_code=422, content=exc.to_dict())


# --- Health Check ---

@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


# --- Graph ---

@app.post("/api/graph")
async def graph(catalog: Catalog):
    """Build the unpositioned prerequisite graph for a catalog."""
    return build_graph(catalog).to_json_dict()


@app.post("/api/layout")
async def layout(request: LayoutRequest):
    """
    Build and lay out the prerequisite graph.

    Returns 422 with the unresolved course ids if the graph has a cycle,
    or the repeated ids if two courses share one.
    """
    settings = get_settings()
    direction = request.direction or settings.default_direction

    graph = build_graph(request.catalog)
    nodes = layout_elements(graph.nodes, graph.edges, direction, settings.layout_config())

    return {
        "direction": direction.value,
        "nodes": [n.to_json_dict() for n in nodes],
        "edges": [e.to_json_dict() for e in graph.edges],
    }


@app.post("/api/courses/{course_id}/relations")
async def course_relations(course_id: str, catalog: Catalog):
    """
    Get the direct prerequisites and dependents of a course.

    Used by the details panel for its "prerequisite of" / "required for" lists.
    """
    course = catalog.get_course(course_id)
    if course is None:
        raise HTTPException(status_code=404, detail=f"Course {course_id} not found")

    edges = build_graph(catalog).edges
    return {
        "course_id": course.id,
        "prerequisites": get_prerequisite_courses(edges, course.id),
        "dependents": get_dependent_courses(edges, course.id),
    }


# --- Analysis & Validation ---

@app.post("/api/validate")
async def validate(catalog: Catalog):
    """
    Validate a catalog for structural issues.

    Returns a list of issues (errors, warnings, info) and a summary.
    """
    issues = validate_catalog(catalog)
    summary = validation_summary(issues)

    return {
        "success": True,
        "issues": [issue.to_dict() for issue in issues],
        "summary": summary
    }


@app.post("/api/summary")
async def summarize(catalog: Catalog):
    """
    Get a structural summary of a catalog.

    Returns course counts, credits, depth, connected components
    and most connected courses.
    """
    summary = summarize_catalog(catalog)

    return {
        "success": True,
        "summary": summary.to_dict()
    }


# --- Run with uvicorn ---

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
