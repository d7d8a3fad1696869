"""
Bundled example data for LollyPlot
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Pfam graphic for human TP53 (P04637)
EXAMPLE_TP53_GRAPHIC = os.path.join(DATA_DIR, 'tp53_pfam.json')
