"""
Prefect flows for the dataset build.

Flows:
- fetch: Download and normalize species 1..max_id from PokeAPI
- build: Fetch, apply per-generation patches, write species.json per generation

Usage (local):
    python -m dexbuild.flows.fetch
    python -m dexbuild.flows.build

Usage (CLI):
    dexbuild build --max-id 151 --generation gen9
"""
