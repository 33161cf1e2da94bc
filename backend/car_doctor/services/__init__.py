"""Services Layer — one repository per collection, one storage call per method.

Invariants:
    - Repositories receive the MongoManager explicitly (no global client access)
    - Every driver call runs inside MongoManager.operation()
    - Write results are rendered in the driver-neutral wire shape (write_results.py)
"""
