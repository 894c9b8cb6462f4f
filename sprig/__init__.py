"""
Sprig: a tree-walking evaluator for a very small expression language.
Programs are built directly as trees of the node classes in `sprig.syntax`.
"""
