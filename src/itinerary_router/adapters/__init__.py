"""
Adapters for the Itinerary Router.

- data_providers: where leg rows come from (static records, SQLite)
- repositories: cached, immutable catalog snapshots
- algorithms: bridges from the ItineraryFinder port to the search core
"""
