"""Settings package for the UniStay project.

`base.py` contains the configuration shared across environments. The
`dev.py`, `test.py` and `prod.py` modules extend it with environment
specific overrides.
"""
