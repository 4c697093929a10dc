"""
HTTP routes, grouped by API version.

Only ``v1`` exists; ``main.create_app`` mounts its ``router`` under
``/v1``.
"""
