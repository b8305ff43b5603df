"""Aircraft systems package.

This package contains the electrical bus model and the redundant radio
altimeter installation built on top of it.
"""
