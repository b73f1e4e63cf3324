"""Utility functions and tools used across the pfoana package.

**Core Utilities:**
- `logger`: Logging configuration shared by every module
- `globals`: Global constants (hit views, particle codes, sentinels)
- `enums`: Enumerated types built from the global constants
- `errors`: Typed exceptions raised by the reconstruction modules
- `factory`: Generic factory used to build modules from configuration blocks
"""
