# /tutorhub/services/reporting_helpers/__init__.py

"""
Pure aggregators that turn record snapshots into dashboard figures.

None of these modules touch the database. They are handed already-fetched,
already-narrowed records by the services and return plain summary models,
so they can be called afresh on every refresh and tested without fixtures.
"""
