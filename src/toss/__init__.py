# Filename: __init__.py
# Author: Rich Lewis @RichLewis007
# Description: Top-level package initialization for toss.

__all__ = ["__author__", "__version__"]

__version__ = "0.1.0"
__author__ = "Rich Lewis"
