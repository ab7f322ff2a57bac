"""Survey data sources.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── models.py         # Result dataclasses and exceptions
    └── {feature}.py      # Load/validate/join functions

Only ``birdata/`` exists today: BirdLife Australia Birdata exports
(``surveys.csv`` + ``sightings.csv``) as downloaded for the Perth NRM region.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.

2. Write functions that take and return DataFrames. File access goes
   through ``DataStore.read_table`` in the flow, not here.

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/extract.py``):
   - Add a ``@task`` that reads the file from the store and validates it
   - Call your functions from ``extract_all()``

5. Add tests in ``tests/test_{name}.py``.
"""
