"""File system tree representation with configurable exclusion rules.

This package provides the node types, filesystem access, ordering and
tree-building logic used to turn a directory into a sorted hierarchy of
directories and files.
"""
