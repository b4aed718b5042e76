"""
High-level use cases for the ERP backend.

Each service module orchestrates record stores to implement a workflow
(seed reference data, exchange CSV files). Routers call these services or the
record stores directly; nothing here touches a backing store's raw strings.
"""
