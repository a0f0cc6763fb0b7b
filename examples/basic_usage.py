#!/usr/bin/env python3
"""
Example: Basic usage of iterbar as a Python library
"""

import time

from iterbar import tqdm, trange

# Borrow a list and rewrite it in place
data = list(range(1000, 6000))
bar = tqdm(data, prefix="doubling ")
for i, value in enumerate(bar):
    data[i] = value * 2
    time.sleep(0.0002)
    bar.append_to_suffix(data[i])
print()

# A generator is consumed up front and owned by the adapter
for value in tqdm((x * x for x in range(3000)), prefix="squares "):
    time.sleep(0.0002)
print()

# Integer ranges
bar = trange(100, 5000, bar_width=40)
for value in bar:
    time.sleep(0.0002)
    bar.append_to_suffix(value)
print()

print(f"Done: {len(data)} elements doubled, last value {data[-1]}")
