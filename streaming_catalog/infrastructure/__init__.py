"""
Infrastructure layer.

Concrete collaborators for the application layer and the dependency
injection container that wires them.
"""
