# src/scale_format/core/constants.py

# Magnitude thresholds for quantization, smallest first, paired by index with UNITS.
MAGNITUDES = (10**3, 10**6, 10**9, 10**12)
UNITS = ("K", "M", "B", "T")

# ZEROS[n] == "0." followed by n zeros. Used to left-pad short mantissas.
ZEROS = tuple("0." + "0" * n for n in range(13))

# Exact integer powers of ten for the practical scale range.
POW10 = tuple(10**n for n in range(19))
