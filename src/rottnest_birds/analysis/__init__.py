"""Analyzer transforms over the merged observation table.

Each module is a set of pure DataFrame -> DataFrame functions. ``dag.py``
wires them into a Hamilton DAG so the flow can ask for any table by name.

Dependency rule: analysis/ imports from reference/ and schemas only.
It never reads files and has no Prefect decorators.

Modules:
  - cleaning: type coercion, Year/Month derivation, complete-survey filter
  - classify: bushbird flag and surveyGroup per row
  - distance: parse "<range>=<count>" sighting notes into rows
  - aggregate: grouped counts and richness statistics
  - dag: Hamilton nodes, one per derived table

Adding a derived table
----------------------
1. Write a pure function in ``aggregate.py`` (or a new module)::

       def thing_counts(observations: pd.DataFrame) -> pd.DataFrame:
           ...

2. Add a node to ``dag.py`` whose parameter names are the upstream nodes
   it needs, and append its name to ``TABLE_NODES``.

3. ``flows/analyze.py`` saves every node in ``TABLE_NODES`` as
   ``derived/tables/{name}.csv``; nothing else to wire.

4. Add tests in ``tests/test_{module}.py``.
"""
