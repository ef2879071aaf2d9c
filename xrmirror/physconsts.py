# -*- coding: utf-8 -*-
__date__ = "19 Oct 2026"

PI = 3.1415926535897932384626433832795
PI2 = 6.283185307179586476925286766559

C = 2.99792458e10  # [cm/sec]
HPLANCK = 6.626069573e-27  # [erg*sec]
EV2ERG = 1.602176565e-12  # Energy conversion from [eV] to [erg]
R0 = 2.817940285e-5  # A
AVOGADRO = 6.02214199e23  # atoms/mol
CHeVcm = HPLANCK * C / EV2ERG  # {c*h[eV*cm]}
CH = CHeVcm * 1e8  # {c*h[eV*A]}
CHBAR = CH / PI2  # {c*h/(2pi)[eV*A]}
