"""
Statistics backends.

Available backends:
    CPUStatisticsBackend: NumPy reference implementation
"""

from pysigma.descriptive.backends.cpu import CPUStatisticsBackend

__all__ = [
    "CPUStatisticsBackend",
]
