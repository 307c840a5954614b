"""
Goals: top-level objectives that tasks hang off.
"""
