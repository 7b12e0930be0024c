"""
Application layer.

Use cases that orchestrate domain objects on behalf of callers. Outcomes
are returned as Result values rather than raised.
"""
