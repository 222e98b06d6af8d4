"""Heading numbering engine: numeral styles, heading parsing, counters and rebuilding."""
