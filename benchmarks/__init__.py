"""
Benchmark suite for mjson parsing and rendering performance.

Compares mjson against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed, rendering speed and memory usage across different
data shapes.
"""
