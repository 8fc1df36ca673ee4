"""
Adapter implementations for the Airport Router.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of data sources, algorithms, and caching.
"""
