"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: SQL access for each table
- Schemas: API contract (what client sends/receives)
"""
