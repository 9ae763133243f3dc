"""
Queryflow - graph-construction and validation engine for the query-processing
flowchart exercise.

Core modules:
- schema: Node/Edge models and the editable graph state
- reference: Fixed reference pipeline (catalog, edges, adjacency, layout)
- evaluation: Scoring of a user graph against the reference
- session: Command facade, event bus, scheduler and solution reveal
"""

__version__ = "0.1.0"
