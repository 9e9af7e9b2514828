"""
ZK-PRET Core Engine - HTTP dispatcher for compliance proof generation.

Provides REST endpoints for:
- Eight compliance proof types (GLEIF, Corporate, EXIM, Risk,
  Process Integrity, Data Integrity, SCF, Composed)
- Health checks
- An endpoint catalog
"""

__version__ = "3.6.0"
