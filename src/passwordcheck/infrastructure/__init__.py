"""Infrastructure layer for passwordcheck.

This package contains adapters to external libraries: credential
verification, the strength oracle, and the host hook.
"""
