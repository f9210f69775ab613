"""Constants for the circulant core tabu search."""

# MRG32k3a (L'Ecuyer) combined multiple recursive generator
NORM = 2.328306549295728e-10
M1 = 4294967087.0
M2 = 4294944443.0
A12 = 1403580.0
A13N = 810728.0
A21 = 527612.0
A23N = 1370589.0

# Smallest sequence length with at least one autocorrelation shift
MIN_ELL = 3

SOLUTION_ANNOUNCEMENT = "FOUND SOLUTION AT TIME: {elapsed:.2f}"
GLYPH_SEPARATOR = "   "

DESCRIPTION = """\
Tabu search to find circulant cores
for the construction of Hadamard matrices
(Authors: marco@imada.sdu.dk,  paquete@dei.uc.pt)"""

EPILOG = """\
When a solution is found it is printed in the standard output
and in a file with name: sol-<prog>-(1)-(2)-(3)-(4)-(5).txt"""
