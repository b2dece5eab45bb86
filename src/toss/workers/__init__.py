# Filename: __init__.py
# Author: Rich Lewis @RichLewis007
# Description: Worker components package. Exports the worker that drains queued toss and
#              recover moves.

__all__ = ["move_worker"]
