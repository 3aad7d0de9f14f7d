# utils/examples.py
# This file is part of Clausa - A First-Order Logic Normal Form Converter
#
# Bundled example formulas for quick experimentation

"""Example formulas in LaTeX-style notation.

Each entry exercises a different part of the conversion pipeline: implication
elimination under a quantifier, quantifiers on both sides of an implication,
Skolem functions, a propositional implication between compound formulas, and
a biconditional expressing De Morgan's law.
"""

EXAMPLE_FORMULAS = (
    "\\forall x (P(x) \\rightarrow Q(x))",
    "\\exists x (P(x) \\land Q(x)) \\rightarrow \\forall y R(y)",
    "\\forall x \\exists y (P(x) \\rightarrow (Q(x,y) \\land R(y)))",
    "(A \\land B) \\rightarrow (C \\lor D)",
    "\\neg (P \\land Q) \\leftrightarrow (\\neg P \\lor \\neg Q)",
)
