"""
Example: Build part of the flowchart, score it, then reveal the solution.

This example demonstrates the basic usage of a queryflow session.
"""

from queryflow.config import SessionConfig
from queryflow.session import EventType, FlowchartSession
from queryflow.utils.logger import setup_logger


def main():
    """Run example session."""
    setup_logger("queryflow")

    session = FlowchartSession(config=SessionConfig(seed=42))
    session.bus.subscribe(
        lambda e: print(f"  edge {e['edge'].id} at {e['at_ms']}ms"),
        EventType.EDGE_ADDED,
    )

    # A learner wires the first half of the pipeline
    user = session.add_node("User")
    kb = session.add_node("Knowledge Base")
    engine = session.add_node("AI Engine (Chain)")
    retriever = session.add_node("Retriever")
    session.connect(user, kb)
    session.connect(kb, engine)
    session.connect(retriever, engine)  # wrong direction

    print("Suggested targets for AI Engine:",
          sorted(k.value for k in session.suggest_targets(engine)))

    result = session.evaluate()
    print(f"\n{result.summary()}")
    print(result.feedback)
    print("\n## Missing connections")
    for expected in result.missing:
        print(f"  - {expected}")

    # Reveal the answer
    print("\nRevealing solution...")
    session.reveal_solution()
    session.run_pending()

    print(f"\n{session.graph.summary()}")
    print(session.evaluate().summary())


if __name__ == "__main__":
    main()
