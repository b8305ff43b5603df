"""Avionics plugins.

This package provides the dual radio altimeter plugin.
"""
