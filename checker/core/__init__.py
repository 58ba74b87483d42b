"""
Core comparison logic: models, diff engine, renderers and batch runner.
"""
