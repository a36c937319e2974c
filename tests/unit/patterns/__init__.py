"""Design pattern tests package.

One module per pattern, covering the observable contract of each example.
"""
