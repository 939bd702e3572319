"""Model maths: closed-form BSM formulas and CRR lattice parameters."""
