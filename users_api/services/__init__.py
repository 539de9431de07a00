"""Services Layer — orchestrates pure core logic around store IO.

Invariants:
    - Services receive their repository as an argument (never import a global)
    - Every service function returns a HandlerResult; none of them raise
"""
