"""Well-known algorithms for the 3x3x3 cube."""

from norcina.moves import parse_alg

SLEDGEHAMMER = tuple(parse_alg("RP F R FP"))

PLL_T = tuple(parse_alg("R U RP UP RP F R2 UP RP UP R U RP FP"))
PLL_J = tuple(parse_alg("R U RP F R U RP UP RP FP R2 UP RP"))
PLL_U_A = tuple(parse_alg("R2 UP RP UP R U R U R UP R"))
PLL_U_B = tuple(parse_alg("RP U RP UP RP UP RP U R U R2"))
PLL_U = PLL_U_A

CHECKER = tuple(parse_alg("R2 L2 U2 D2 F2 B2"))