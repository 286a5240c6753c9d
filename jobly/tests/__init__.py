'''
Jobly Backend Test Suite

Test Modules:
-------------
- test_partial_update.py: SET fragment builder (ordering, aliases, allow-list)
- test_filters.py: Filter predicate composer for companies and jobs
- test_queries.py: Statement text assembled from fragments
- test_companies_service.py / test_jobs_service.py: Repositories against a
  mock asyncpg connection, including error translation
- test_dependencies.py: Authorization guards
- test_database.py: Pool lifecycle and query helpers
- test_api.py: Routes through the FastAPI TestClient

Running Tests:
--------------
    pip install -e ".[test]"
    pytest jobly/tests -v
'''

__all__ = []
