"""Service layer.

Layer hierarchy:
    Routes (HTTP) -> Validators -> Services -> Repositories (Database)

Services call exactly one repository per operation and always answer with
a response envelope. Errors are logged, the transaction is rolled back and
the client receives ``{"error", "message"}`` with a 400 (or the status the
error carries).
"""
