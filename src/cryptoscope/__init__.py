"""
Cryptoscope
Classical cipher cryptanalysis and byte encoding toolkit
"""

__version__ = "1.0.0"
