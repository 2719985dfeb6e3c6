"""Grid configuration engine.

Pure computations over column, row and baseline grid configurations:
unit resolution, aspect ratios, track geometry, scaling, validation,
preview line segments and color conversion, plus a built-in preset
catalogue.
"""

__version__ = "0.1.0"
