"""dexbuild - per-generation species datasets generated from PokeAPI.

Architecture::

    datasources/   PokeAPI client, payload models, record builder
    localize.py    Name/type localization and slug helpers (pure)
    reconcile.py   Per-generation patch overlays on the base dataset
    store.py       Dataset output ({gen}/species.json + sidecar metadata)
    flows/         Prefect orchestration (fetch builds the base, build writes gens)
    services/      Shared utilities (HTTP session)

Data flow: datasources -> flows/fetch (base dataset) -> reconcile -> store
"""

__version__ = "0.1.0"

from dexbuild.config import Settings
from dexbuild.schemas import SpeciesRecord

__all__ = ["Settings", "SpeciesRecord", "__version__"]
