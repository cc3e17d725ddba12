"""Algorithms used by the path interpolation pipeline.

Pure pandas/numpy reference implementations of the steps the interpolator
relies on (time-proportional tweening of grouped samples).
"""
