"""
Persistence adapters.

These modules encapsulate how resource records are stored and retrieved
(today one JSON file per resource). Services depend on the RecordStore
interface rather than touching the files.
"""
