"""Core codec modules: internal format, time codec, character table,
line encoder, timed-text parser and SCC emitter.

WHY: These modules are the stable heart of the converter. The converter
class in converters/ is a thin wrapper around them.

HOW: ir.py defines the data structures; timecode.py and charset.py are
leaf codecs; line_encoder.py builds on charset; parser.py and
emitter.py compose the leaves into the two conversion directions.

RULES:
- Every function here is pure: no file I/O, no shared mutable state
- The character table is read-only data built once at import
"""
