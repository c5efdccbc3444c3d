"""protologic_fleets

Core package namespace for the fleet build/battle tool.

Why this exists
---------------
The CLI (``cli``), the orchestration layer (``pipeline``) and the external
tool adapters (``tools``) all need to agree on the same vocabulary:

* domain types (raw artifacts, optimized fleets, optimization profiles)
* filesystem contracts (where artifacts live and how fleets are named)
* the error taxonomy every command reports through

This package owns those contracts and depends on nothing else in the repo.
"""

from __future__ import annotations

__version__ = "0.2.0"
