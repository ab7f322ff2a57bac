"""
Prefect flows for the survey pipeline.

Flows:
- extract: Cut the Perth NRM export down to Rottnest and join sightings to surveys
- analyze: Clean, classify and aggregate the merged table into derived tables

Usage (local):
    python -m rottnest_birds.flows.extract
    python -m rottnest_birds.flows.analyze

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    rottnest-birds run
"""
