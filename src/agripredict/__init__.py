"""
agripredict: in-process crop recommendation and yield prediction.

Small feed-forward networks are trained at startup on synthetic
agronomic data and served with rule-based post-processing.
"""

from importlib.metadata import version

__version__ = version("agripredict")

__all__ = ["__version__"]
