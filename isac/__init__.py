"""
isac-shell: an interactive shell whose prompt comes from pluggable providers.
"""

__version__ = "0.1.0"
