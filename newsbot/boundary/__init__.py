"""
Boundary layer: persistence, model providers and session storage adapters.
"""
