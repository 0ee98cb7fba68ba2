"""
Service layer abstraction.

Services encapsulate the catalog's business rules (validation, the
derived missing letter and SKU uniqueness) so that API handlers only
translate between HTTP and service calls.
"""
